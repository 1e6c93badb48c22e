"""agecalc — birth date validation and age calculation."""

__version__ = "0.1.0"
