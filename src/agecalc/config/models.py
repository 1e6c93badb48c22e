"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``agecalc.toml`` only carries
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    min_year: int = 1900
    reject_future_dates: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_total_months: bool = False
