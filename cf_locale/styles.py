"""Preset date and time layouts.

Patterns use a small CLDR-like token language; see
``cf_format.formatters.temporal`` for the supported tokens.
"""

from __future__ import annotations

# style id -> (name, pattern)
DATE_STYLES: dict[int, tuple[str, str]] = {
    1: ("iso", "yyyy-MM-dd"),
    2: ("wday_month_day_year", "EEEE, MMMM d, y"),
    3: ("wd_m_day_year", "EEE, MMM d, y"),
    4: ("wday_day_month_year", "EEEE d MMMM y"),
    5: ("month_day_year", "MMMM d, y"),
    6: ("m_day_year", "MMM d, y"),
    7: ("day_m_year", "d MMM y"),
    8: ("day_month_year", "d MMMM y"),
    9: ("day_month", "d MMMM"),
    10: ("day_m", "d MMM"),
    11: ("year", "y"),
    12: ("month", "MMMM"),
    13: ("day", "dd"),
    14: ("year.mn.day", "y/MM/dd"),
    15: ("y.mn.day", "yy/MM/dd"),
    16: ("year_week", "Y-'W'ww"),
    17: ("year_quarter", "y-'Q'Q"),
}

TIME_STYLES: dict[int, tuple[str, str]] = {
    1: ("iso", "HH:mm:ss"),
    2: ("iso-short", "HH:mm"),
    3: ("h_m_s_p", "h:mm:ss a"),
    4: ("h_m_p", "h:mm a"),
    5: ("h_p", "h a"),
}
