"""English language support: casing, months, ordinals, language names."""

from refstyle.lang.casing import SentenceCase, TitleCase
from refstyle.lang.english import (
    format_date,
    format_month_day,
    get_language_name,
    get_month_abbr,
    get_ordinal,
    is_english,
)


__all__ = [
    "SentenceCase",
    "TitleCase",
    "format_date",
    "format_month_day",
    "get_language_name",
    "get_month_abbr",
    "get_ordinal",
    "is_english",
]
