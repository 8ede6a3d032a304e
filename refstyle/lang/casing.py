"""Title case and sentence case for English titles.

Both transforms leave words alone when they already carry deliberate
capitalization past their first letter ("NASA", "iPhone", "LaTeX", "3D"),
and treat each hyphen-separated part of a compound separately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


_WORD = re.compile(r"\S+")
_CLAUSE_END = (":", "?", "!", "—", "–")

# Articles, conjunctions and short prepositions
MINOR_WORDS = frozenset(
    {
        "a", "an", "the",
        "and", "but", "for", "nor", "or", "so", "yet",
        "as", "at", "by", "en", "in", "of", "off", "on", "per", "to", "up", "via", "vs",
        "from", "into", "like", "near", "onto", "over", "past", "than", "that", "upon", "with",
    }
)


def _letters(part: str) -> str:
    return "".join(c for c in part if c.isalnum())


def _has_inner_caps(part: str) -> bool:
    core = _letters(part)
    return any(c.isupper() for c in core[1:])


def _capitalize(part: str) -> str:
    for index, char in enumerate(part):
        if char.isalpha():
            return part[:index] + char.upper() + part[index + 1:]
    return part


def _map_words(text: str, transform) -> str:
    """Apply `transform(word, index, count, previous)` to each word, keeping spacing."""
    words = list(_WORD.finditer(text))
    out = []
    last = 0
    previous = None
    for index, match in enumerate(words):
        out.append(text[last:match.start()])
        out.append(transform(match.group(), index, len(words), previous))
        previous = match.group()
        last = match.end()
    out.append(text[last:])
    return "".join(out)


@dataclass(frozen=True)
class TitleCase:
    """Capitalize every word except short minor words.

    Attributes:
        always_capitalize_min_len: Words at least this long are capitalized
            even when they are minor words ("With", "From"). None or 0
            disables the rule.
    """

    always_capitalize_min_len: int | None = 4

    def apply(self, text: str) -> str:
        """Return `text` in title case."""
        return _map_words(text.strip(), self._word)

    def _word(self, word: str, index: int, count: int, previous: str | None) -> str:
        forced = index == 0 or index == count - 1 or (
            previous is not None and previous.endswith(_CLAUSE_END)
        )
        parts = word.split("-")
        return "-".join(
            self._part(part, forced and position == 0)
            for position, part in enumerate(parts)
        )

    def _part(self, part: str, forced: bool) -> str:
        core = _letters(part)
        if not core or _has_inner_caps(part):
            return part

        if not forced and core.lower() in MINOR_WORDS and not self._long_enough(core):
            return part.lower()
        return _capitalize(part)

    def _long_enough(self, core: str) -> bool:
        if not self.always_capitalize_min_len:
            return False
        return len(core) >= self.always_capitalize_min_len


@dataclass(frozen=True)
class SentenceCase:
    """Lowercase every word except the first one and deliberate capitals.

    Attributes:
        capitalize_after_colon: Start a new sentence after ":", "?", "!"
    """

    capitalize_after_colon: bool = True

    def apply(self, text: str) -> str:
        """Return `text` in sentence case."""
        return _map_words(text.strip(), self._word)

    def _word(self, word: str, index: int, count: int, previous: str | None) -> str:
        starts_sentence = index == 0 or (
            self.capitalize_after_colon
            and previous is not None
            and previous.endswith(_CLAUSE_END)
        )
        parts = word.split("-")
        return "-".join(
            self._part(part, starts_sentence and position == 0)
            for position, part in enumerate(parts)
        )

    def _part(self, part: str, starts_sentence: bool) -> str:
        core = _letters(part)
        if not core:
            return part
        if starts_sentence:
            return _capitalize(part)
        if _has_inner_caps(part):
            return part
        # single letters other than the article keep their case ("vitamin D")
        if len(core) == 1 and core != "A":
            return part
        return part.lower()


__all__ = [
    "MINOR_WORDS",
    "SentenceCase",
    "TitleCase",
]
