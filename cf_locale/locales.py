"""Built-in locale reference data (separators and calendar names)."""

from __future__ import annotations

from dataclasses import dataclass

from cf_locale.interface import CalendarNames

NARROW_NBSP = "\u202f"
NBSP = "\u00a0"


@dataclass(frozen=True)
class LocaleData:
    sep_mark: str
    dec_mark: str
    calendar: CalendarNames


ENGLISH = CalendarNames(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_abbr=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
    weekdays_abbr=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)

GERMAN = CalendarNames(
    months=(
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    months_abbr=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ),
    weekdays=(
        "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag",
    ),
    weekdays_abbr=("Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."),
)

FRENCH = CalendarNames(
    months=(
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    months_abbr=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekdays=(
        "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche",
    ),
    weekdays_abbr=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
)

SPANISH = CalendarNames(
    months=(
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    months_abbr=(
        "ene", "feb", "mar", "abr", "may", "jun",
        "jul", "ago", "sept", "oct", "nov", "dic",
    ),
    weekdays=(
        "lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo",
    ),
    weekdays_abbr=("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
    periods=("a. m.", "p. m."),
)

ITALIAN = CalendarNames(
    months=(
        "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
        "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
    ),
    months_abbr=(
        "gen", "feb", "mar", "apr", "mag", "giu",
        "lug", "ago", "set", "ott", "nov", "dic",
    ),
    weekdays=(
        "lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica",
    ),
    weekdays_abbr=("lun", "mar", "mer", "gio", "ven", "sab", "dom"),
)

DUTCH = CalendarNames(
    months=(
        "januari", "februari", "maart", "april", "mei", "juni",
        "juli", "augustus", "september", "oktober", "november", "december",
    ),
    months_abbr=(
        "jan", "feb", "mrt", "apr", "mei", "jun",
        "jul", "aug", "sep", "okt", "nov", "dec",
    ),
    weekdays=(
        "maandag", "dinsdag", "woensdag", "donderdag", "vrijdag", "zaterdag", "zondag",
    ),
    weekdays_abbr=("ma", "di", "wo", "do", "vr", "za", "zo"),
    periods=("a.m.", "p.m."),
)

PORTUGUESE = CalendarNames(
    months=(
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    months_abbr=(
        "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
        "jul.", "ago.", "set.", "out.", "nov.", "dez.",
    ),
    weekdays=(
        "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
        "sexta-feira", "sábado", "domingo",
    ),
    weekdays_abbr=("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom."),
)

SWEDISH = CalendarNames(
    months=(
        "januari", "februari", "mars", "april", "maj", "juni",
        "juli", "augusti", "september", "oktober", "november", "december",
    ),
    months_abbr=(
        "jan.", "feb.", "mars", "apr.", "maj", "juni",
        "juli", "aug.", "sep.", "okt.", "nov.", "dec.",
    ),
    weekdays=(
        "måndag", "tisdag", "onsdag", "torsdag", "fredag", "lördag", "söndag",
    ),
    weekdays_abbr=("mån", "tis", "ons", "tors", "fre", "lör", "sön"),
    periods=("fm", "em"),
)

LOCALES: dict[str, LocaleData] = {
    "en": LocaleData(",", ".", ENGLISH),
    "en-US": LocaleData(",", ".", ENGLISH),
    "en-GB": LocaleData(",", ".", ENGLISH),
    "en-IN": LocaleData(",", ".", ENGLISH),
    "de": LocaleData(".", ",", GERMAN),
    "de-AT": LocaleData(NARROW_NBSP, ",", GERMAN),
    "de-CH": LocaleData("’", ".", GERMAN),
    "fr": LocaleData(NARROW_NBSP, ",", FRENCH),
    "fr-CA": LocaleData(NBSP, ",", FRENCH),
    "fr-CH": LocaleData(NARROW_NBSP, ".", FRENCH),
    "es": LocaleData(".", ",", SPANISH),
    "es-MX": LocaleData(",", ".", SPANISH),
    "it": LocaleData(".", ",", ITALIAN),
    "nl": LocaleData(".", ",", DUTCH),
    "pt": LocaleData(NBSP, ",", PORTUGUESE),
    "pt-BR": LocaleData(".", ",", PORTUGUESE),
    "sv": LocaleData(NBSP, ",", SWEDISH),
}


def normalize_locale(code: str) -> str:
    """Normalize ``en_us`` / ``EN-us`` style codes to ``en-US``."""
    parts = code.replace("_", "-").split("-")
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return "-".join([language, parts[1].upper(), *parts[2:]])
