"""Provider interfaces for locale, currency, date-style and palette data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class CurrencySpec:
    """Display data for a currency code."""

    code: str
    symbol: str
    digits: int


@dataclass(frozen=True)
class CalendarNames:
    """Month, weekday and day-period names for one locale.

    Weekdays start on Monday to line up with ``date.weekday()``.
    """

    months: tuple[str, ...]
    months_abbr: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekdays_abbr: tuple[str, ...]
    periods: tuple[str, str] = ("AM", "PM")


@runtime_checkable
class LocaleProvider(Protocol):
    """Lookup table for separators, currencies and date/time layouts."""

    def get_separators(self, locale: str) -> tuple[str, str]:
        """Return ``(sep_mark, dec_mark)`` for ``locale``."""
        ...

    def get_currency(self, code: str) -> CurrencySpec:
        ...

    def get_date_style(self, style: int | str) -> str:
        """Return the token pattern for a preset date style."""
        ...

    def get_time_style(self, style: int | str) -> str:
        """Return the token pattern for a preset time style."""
        ...

    def get_calendar_names(self, locale: str | None) -> CalendarNames:
        ...


@runtime_checkable
class PaletteProvider(Protocol):
    """Lookup table for named color palettes."""

    def get_palette(self, name: str) -> Sequence[str]:
        ...
