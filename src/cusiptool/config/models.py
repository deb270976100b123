"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cusiptool.toml only contains
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- cusiptool.toml sections ---


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    fix: bool = False
    report_invalid: bool = True
    skip_blank: bool = False
    strip_whitespace: bool = False
