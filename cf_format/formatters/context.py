"""Per-render formatting context handed to every value formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cf_locale.api import LocaleProvider


@dataclass(frozen=True)
class FormatContext:
    """Locale provider plus the fallback locale for rules that name none."""

    locale_provider: LocaleProvider
    locale: Optional[str] = None

    def resolve_locale(self, locale: Optional[str]) -> Optional[str]:
        return locale or self.locale

    def marks(self, locale: Optional[str], sep_mark: str, dec_mark: str) -> tuple[str, str]:
        """Locale separators when a locale applies, else the explicit marks."""
        resolved = self.resolve_locale(locale)
        if resolved is None:
            return sep_mark, dec_mark
        return self.locale_provider.get_separators(resolved)
