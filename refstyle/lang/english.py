"""English month, ordinal, date and language-name rendering.

Month and language names come from Babel's English locale data, loaded
once per process and treated as read-only.
"""

from __future__ import annotations

from functools import lru_cache

from babel import Locale
from babel.dates import get_month_names

from refstyle.schemas.entry import Date


_ENGLISH = "en"


@lru_cache
def _english_locale() -> Locale:
    return Locale.parse(_ENGLISH)


@lru_cache
def _month_names() -> tuple[str, ...]:
    names = get_month_names("wide", locale=_english_locale())
    return tuple(names[i] for i in range(1, 13))


def get_month_name(month: int) -> str | None:
    """Full English month name for a zero-indexed month."""
    if not 0 <= month <= 11:
        return None
    return _month_names()[month]


def get_month_abbr(month: int, period: bool = True) -> str | None:
    """Abbreviated month name for a zero-indexed month.

    Names longer than four letters are cut to three ("Jan."); shorter ones
    stay whole ("May", "June", "July"). September is "Sept." as in the IEEE
    Reference Guide's month table.
    """
    name = get_month_name(month)
    if name is None:
        return None
    if len(name) <= 4:
        return name
    if month == 8:
        return "Sept" + ("." if period else "")
    return name[:3] + ("." if period else "")


def get_ordinal(number: int) -> str:
    """English ordinal: 1st, 2nd, 3rd, 4th, 11th, 12th, 13th, 21st."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def format_month_day(date: Date) -> str | None:
    """"Mar. 5" or "Mar." for dates that carry a month."""
    if date.month is None:
        return None
    month = get_month_abbr(date.month)
    if month is None:
        return None
    if date.day is not None:
        return f"{month} {date.day + 1}"
    return month


def format_date(date: Date) -> str:
    """Render "Mar. 5, 2020", "Mar. 2020" or "2020"."""
    month_day = format_month_day(date)
    if month_day is None:
        return date.display_year()
    if date.day is not None:
        return f"{month_day}, {date.display_year()}"
    return f"{month_day} {date.display_year()}"


def primary_language(code: str) -> str:
    """Primary subtag of a language tag ("de-AT" -> "de")."""
    return code.replace("_", "-").split("-", 1)[0].strip().lower()


def is_english(code: str) -> bool:
    """Whether a language tag denotes English."""
    return primary_language(code) == _ENGLISH


def get_language_name(code: str) -> str | None:
    """English name of a language tag, or None when Babel does not know it."""
    primary = primary_language(code)
    if not primary:
        return None
    return _english_locale().languages.get(primary)


__all__ = [
    "format_date",
    "format_month_day",
    "get_language_name",
    "get_month_abbr",
    "get_month_name",
    "get_ordinal",
    "is_english",
    "primary_language",
]
