"""Locale, currency, date-style and palette reference providers."""

from cf_locale.api import (  # noqa: F401
    BuiltinLocaleProvider,
    CurrencySpec,
    LocaleProvider,
    PaletteProvider,
    PaletteRegistry,
)

__all__ = [
    "BuiltinLocaleProvider",
    "CurrencySpec",
    "LocaleProvider",
    "PaletteProvider",
    "PaletteRegistry",
]
