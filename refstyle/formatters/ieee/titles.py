"""Title clause for IEEE references.

    Article > Periodical:   “<SC>,” <abbr(TC)>
    Any > Conference:       <SC>. Presented at <abbr(TC)>
    Any > Anthology:        “<SC>,” in <TC> (<series TC>, no. <issue>)
    Entry != canonical:     “<SC>,” in <abbr(TC)>
    Legislation:            <serial number>, <TC>
    Repository, Video, Reference, Book, Proceedings, Anthology: <TC>
    Fallback:               “<SC>,”

SC is sentence case, TC title case; container titles are italic.
"""

from __future__ import annotations

from collections.abc import Mapping

from refstyle.formatters.common import foreign_language_name
from refstyle.formatters.ieee.abbreviations import abbreviate_journal
from refstyle.formatters.rich_text import Formatting, RichText
from refstyle.lang.casing import SentenceCase, TitleCase
from refstyle.schemas.entry import Entry, EntryType
from refstyle.schemas.selectors import find_parent, kinds


OPEN_QUOTE = "“"
CLOSE_QUOTE = "”"

STANDALONE_ITALIC_KINDS = frozenset(
    {
        EntryType.LEGISLATION,
        EntryType.REPOSITORY,
        EntryType.VIDEO,
        EntryType.REFERENCE,
        EntryType.BOOK,
        EntryType.PROCEEDINGS,
        EntryType.ANTHOLOGY,
    }
)

_ANTHOLOGY_SERIES = kinds(EntryType.ANTHOLOGY, fields=("title",))
_PROCEEDINGS_SERIES = kinds(
    EntryType.PROCEEDINGS, EntryType.ANTHOLOGY, EntryType.MISC, fields=("title",)
)


def quoted_with_comma(title: str) -> str:
    return f"{OPEN_QUOTE}{title},{CLOSE_QUOTE}"


class TitleClauseBuilder:
    """Builds the title clause.

    Attributes:
        title_case: Casing applied to container and standalone titles
        sentence_case: Casing applied to contained and quoted titles
        abbreviations: Full title to abbreviation table
    """

    def __init__(
        self,
        title_case: TitleCase,
        sentence_case: SentenceCase,
        abbreviations: Mapping[str, str],
    ) -> None:
        self.title_case = title_case
        self.sentence_case = sentence_case
        self.abbreviations = abbreviations

    def build(self, entry: Entry, canonical: Entry) -> RichText:
        """Return the title clause; empty when there is no title to show."""
        if entry is not canonical:
            return self._contained(entry, canonical)

        if entry.entry_type in STANDALONE_ITALIC_KINDS:
            return self._standalone(entry)

        res = RichText()
        if entry.title is not None:
            res.push(quoted_with_comma(entry.title.as_sentence_case(self.sentence_case)))
        return res

    def _contained(self, entry: Entry, canonical: Entry) -> RichText:
        res = RichText()
        conference = canonical.entry_type == EntryType.CONFERENCE

        if entry.title is not None:
            title = entry.title.as_sentence_case(self.sentence_case)
            res.push(f"{title}." if conference else quoted_with_comma(title))
            if canonical.title is not None:
                res.push(" ")

        if canonical.title is None:
            return res

        container = abbreviate_journal(
            canonical.title.as_title_case(self.title_case), self.abbreviations
        )

        if conference:
            res.push(f"Presented at {container}")
            return res

        language = foreign_language_name(entry.language, canonical.language)
        if language is not None:
            res.push(f"(in {language}) ")

        if not (
            entry.entry_type == EntryType.ARTICLE
            and canonical.entry_type == EntryType.PERIODICAL
        ):
            res.push("in ")
        res.push(container, Formatting.ITALIC)

        if canonical.entry_type == EntryType.ANTHOLOGY:
            series = find_parent(canonical, _ANTHOLOGY_SERIES)
            if series is not None:
                res.push(f" ({series.title.as_title_case(self.title_case)}")
                if series.issue is not None:
                    res.push(f", no. {series.issue}")
                res.push(")")

        if canonical.entry_type == EntryType.PROCEEDINGS:
            series = find_parent(canonical, _PROCEEDINGS_SERIES)
            if series is not None:
                res.push(f" in {series.title.as_title_case(self.title_case)}")

        return res

    def _standalone(self, entry: Entry) -> RichText:
        parts = []
        if entry.entry_type == EntryType.LEGISLATION and entry.serial_number:
            parts.append(entry.serial_number)
        if entry.title is not None:
            parts.append(entry.title.as_title_case(self.title_case))

        res = RichText()
        res.push(", ".join(parts), Formatting.ITALIC)
        return res


__all__ = [
    "STANDALONE_ITALIC_KINDS",
    "TitleClauseBuilder",
    "quoted_with_comma",
]
