"""Domain layer — calendar rules, date validation, and age arithmetic.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
