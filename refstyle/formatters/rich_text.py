"""Rich text built from immutable formatted runs.

A `RichText` is an append-only sequence of `TextRun`s. Formatting is given
per push, so no "current style" outlives the text it applies to. Adjacent
runs with identical formatting are merged.

Rendering to plain text is built in; `to_rich()` converts to a
`rich.text.Text` for console output. Other markup targets belong to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from rich.text import Text


class Formatting(str, Enum):
    """Style flags a run can carry."""

    ITALIC = "italic"
    NO_HYPHENATION = "no_hyphenation"


@dataclass(frozen=True, slots=True)
class TextRun:
    """A stretch of text sharing one set of formats."""

    text: str
    formats: frozenset[Formatting] = frozenset()


class RichText:
    """Append-only formatted text buffer.

    Example:
        >>> text = RichText("in ")
        >>> text.push("Bar Journal", Formatting.ITALIC)
        >>> text.value
        'in Bar Journal'
    """

    __slots__ = ("_runs",)

    def __init__(self, text: str = "") -> None:
        self._runs: list[TextRun] = []
        self.push(text)

    @classmethod
    def from_runs(cls, runs: list[TextRun]) -> RichText:
        res = cls()
        for run in runs:
            res.push(run.text, *run.formats)
        return res

    @property
    def runs(self) -> tuple[TextRun, ...]:
        return tuple(self._runs)

    @property
    def value(self) -> str:
        """The plain text content."""
        return "".join(run.text for run in self._runs)

    def push(self, text: str, *formats: Formatting) -> None:
        """Append `text` carrying `formats`."""
        if not text:
            return

        flags = frozenset(formats)
        if self._runs and self._runs[-1].formats == flags:
            self._runs[-1] = TextRun(self._runs[-1].text + text, flags)
        else:
            self._runs.append(TextRun(text, flags))

    def extend(self, other: RichText) -> None:
        """Append every run of `other`."""
        for run in other.runs:
            self.push(run.text, *run.formats)

    def truncate(self, count: int) -> None:
        """Drop the last `count` characters, across run boundaries."""
        while count > 0 and self._runs:
            last = self._runs.pop()
            if len(last.text) > count:
                self._runs.append(TextRun(last.text[:-count], last.formats))
                return
            count -= len(last.text)

    def endswith(self, suffix: str) -> bool:
        return self.value.endswith(suffix)

    def is_empty(self) -> bool:
        return not self._runs

    def to_plain(self) -> str:
        return self.value

    def to_rich(self) -> Text:
        """Convert to a `rich.text.Text`, italic runs styled as italic."""
        res = Text()
        for run in self._runs:
            style = "italic" if Formatting.ITALIC in run.formats else ""
            res.append(run.text, style=style)
        return res

    def __len__(self) -> int:
        return sum(len(run.text) for run in self._runs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RichText):
            return NotImplemented
        return self._runs == other._runs

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"RichText({self._runs!r})"


__all__ = [
    "Formatting",
    "RichText",
    "TextRun",
]
