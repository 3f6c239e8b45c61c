"""Default LocaleProvider backed by the built-in reference tables."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from cf_common.api import ReferenceLookupError
from cf_locale.currencies import CURRENCIES
from cf_locale.interface import CalendarNames, CurrencySpec
from cf_locale.locales import ENGLISH, LOCALES, LocaleData, normalize_locale
from cf_locale.styles import DATE_STYLES, TIME_STYLES

logger = logging.getLogger(__name__)


def _resolve_style(
    styles: Mapping[int, tuple[str, str]], style: int | str, label: str
) -> str:
    if isinstance(style, bool):
        raise ReferenceLookupError(
            f"Unknown {label} style: {style!r}", context={"style": style}
        )
    if isinstance(style, int):
        if style in styles:
            return styles[style][1]
    elif isinstance(style, str):
        key = style.strip()
        if key.isdigit() and int(key) in styles:
            return styles[int(key)][1]
        for name, pattern in styles.values():
            if name == key:
                return pattern
    raise ReferenceLookupError(
        f"Unknown {label} style: {style!r}",
        context={"style": style, "available": sorted(styles)},
    )


class BuiltinLocaleProvider:
    """Lookup tables for separators, currencies and preset date/time layouts.

    Extra locales or currencies can be layered over the built-in data; entries
    passed here win over the shipped tables.
    """

    def __init__(
        self,
        locales: Optional[Mapping[str, LocaleData]] = None,
        currencies: Optional[Mapping[str, tuple[str, int]]] = None,
    ) -> None:
        self._locales: dict[str, LocaleData] = dict(LOCALES)
        for code, data in (locales or {}).items():
            self._locales[normalize_locale(code)] = data
        self._currencies: dict[str, tuple[str, int]] = dict(CURRENCIES)
        for code, data in (currencies or {}).items():
            self._currencies[code.upper()] = data

    def _locale_data(self, locale: str) -> LocaleData:
        code = normalize_locale(locale)
        data = self._locales.get(code)
        if data is None:
            # Fall back from a regional variant to its base language.
            data = self._locales.get(code.split("-", 1)[0])
            if data is not None:
                logger.debug("Locale %s resolved via base language", locale)
        if data is None:
            raise ReferenceLookupError(
                f"Unknown locale: {locale!r}", context={"locale": locale}
            )
        return data

    def get_separators(self, locale: str) -> tuple[str, str]:
        data = self._locale_data(locale)
        return data.sep_mark, data.dec_mark

    def get_currency(self, code: str) -> CurrencySpec:
        key = code.strip().upper()
        if key not in self._currencies:
            raise ReferenceLookupError(
                f"Unknown currency code: {code!r}", context={"currency": code}
            )
        symbol, digits = self._currencies[key]
        return CurrencySpec(code=key, symbol=symbol, digits=digits)

    def get_date_style(self, style: int | str) -> str:
        return _resolve_style(DATE_STYLES, style, "date")

    def get_time_style(self, style: int | str) -> str:
        return _resolve_style(TIME_STYLES, style, "time")

    def get_calendar_names(self, locale: str | None) -> CalendarNames:
        if locale is None:
            return ENGLISH
        return self._locale_data(locale).calendar

    def available_locales(self) -> list[str]:
        return sorted(self._locales)
