"""Pipeline-wide defaults."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from cf_common.api import parse_str_env


class FormatSettings(BaseModel):
    """Defaults applied when a rule leaves an option unset."""

    locale: Optional[str] = Field(
        default=None, description="Locale used by rules that do not name one"
    )
    missing_text: str = Field(
        default="NA", description="Text for missing cells without a missing-value rule"
    )
    palette: str = Field(default="viridis", description="Palette for color rules that do not name one")
    na_color: Optional[str] = Field(
        default=None, description="Color for missing cells under a color rule"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FormatSettings":
        """Build settings from ``CF_*`` environment variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for field, var in (
            ("locale", "CF_LOCALE"),
            ("palette", "CF_PALETTE"),
            ("na_color", "CF_NA_COLOR"),
        ):
            value = parse_str_env(env.get(var))
            if value is not None:
                overrides[field] = value
        # Blank replacement text is a legitimate setting, so no stripping here.
        if env.get("CF_MISSING_TEXT") is not None:
            overrides["missing_text"] = env["CF_MISSING_TEXT"]
        return cls(**overrides)
