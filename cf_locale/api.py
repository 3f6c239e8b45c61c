"""Public API surface for cf_locale."""

from cf_locale.interface import CalendarNames, CurrencySpec, LocaleProvider, PaletteProvider
from cf_locale.locales import LocaleData, normalize_locale
from cf_locale.provider import BuiltinLocaleProvider
from cf_locale.registry import PaletteRegistry
from cf_locale.styles import DATE_STYLES, TIME_STYLES

__all__ = [
    "BuiltinLocaleProvider",
    "CalendarNames",
    "CurrencySpec",
    "DATE_STYLES",
    "LocaleData",
    "LocaleProvider",
    "PaletteProvider",
    "PaletteRegistry",
    "TIME_STYLES",
    "normalize_locale",
]
