"""Formatting helpers shared by reference-list styles.

Name lists, numeric ranges, editions, foreign-language labels and
quote-aware closing punctuation.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from refstyle.core.logging import get_logger
from refstyle.formatters.rich_text import RichText
from refstyle.lang.english import get_language_name, get_ordinal, is_english
from refstyle.schemas.entry import NumberRange, Person


logger = get_logger(__name__)

# =============================================================================
# Module Constants
# =============================================================================

CLOSING_QUOTES = ("”", '"')
TERMINAL_PUNCTUATION = (".", "?", "!")
SOFT_PUNCTUATION = (",", ";", ":")
RANGE_DASH = "-"


def name_list_straight(persons: Iterable[Person]) -> list[str]:
    """Render people given-name first with initials ("A. Author")."""
    return [person.given_first(abbreviate=True) for person in persons]


def and_list(names: Sequence[str], et_al_threshold: int) -> str:
    """Join names with commas and "and", truncating long lists.

    With a threshold T > 0 and at least T names only the first two names
    are kept and "et al." is appended. The comma is written for every
    name but the last, so two names read "A, and B".

    Example:
        >>> and_list(["A", "B", "C"], 6)
        'A, B, and C'
        >>> and_list(["A", "B", "C", "D", "E", "F"], 6)
        'A, B, et al.'
    """
    count = len(names)
    truncate = et_al_threshold > 0 and count >= et_al_threshold
    res = ""

    for index, name in enumerate(names):
        if truncate and index > 1:
            break

        res += name

        if index <= count - 2:
            res += ", "
        if index == count - 2:
            res += "and "

    if truncate:
        res += "et al."

    return res


def editors_label(count: int) -> str:
    return "Ed." if count == 1 else "Eds."


def format_range(singular: str, plural: str, value: NumberRange) -> str:
    """Render "vol. 3" or "vols. 1-3" style ranges."""
    if value.is_single:
        return f"{singular} {value.start}"
    return f"{plural} {value.start}{RANGE_DASH}{value.end}"


def format_edition(edition: int | str | None) -> str | None:
    """Ordinal editions above the first ("2nd ed."); free text is kept as given."""
    if edition is None:
        return None
    if isinstance(edition, int):
        return f"{get_ordinal(edition)} ed." if edition > 1 else None
    return edition or None


def foreign_language_name(*codes: str | None) -> str | None:
    """English name of the first declared language, unless it is English.

    Unknown codes yield None so the dependent fragment is left out.
    """
    code = next((c for c in codes if c), None)
    if code is None or is_english(code):
        return None

    name = get_language_name(code)
    if name is None:
        logger.debug("language_code_unknown", language=code)
    return name


def push_comma_quote_aware(text: RichText, mark: str = ".") -> None:
    """End `text` with exactly one `mark`, placing it inside a closing quote.

    A trailing soft mark (comma, semicolon, colon) is replaced, a trailing
    terminal mark (period, question mark, exclamation mark) is kept.
    """
    value = text.value
    if not value:
        return

    quote = value[-1] if value.endswith(CLOSING_QUOTES) else ""
    body = value[:-1] if quote else value
    last = body[-1:]

    if last in TERMINAL_PUNCTUATION:
        return

    drop = len(quote) + (1 if last in SOFT_PUNCTUATION else 0)
    text.truncate(drop)
    text.push(mark + quote)


__all__ = [
    "and_list",
    "editors_label",
    "foreign_language_name",
    "format_edition",
    "format_range",
    "name_list_straight",
    "push_comma_quote_aware",
]
