"""IEEE reference-list formatter.

Follows the 2018 IEEE Reference Guide and "How to Cite References: The
IEEE Citation Style".

Pipeline for one record:
1. Walk up untitled chapters and scenes, collecting their numbers
2. Resolve the canonical parent
3. Build the author clause, title clause and addon fragments
4. Stitch them with IEEE punctuation
5. Append the URL block and the note

Output:
    A. Author, “Foo,” Bar Journal, vol. 3, no. 2, pp. 10-15, Mar. 2020.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache

from refstyle.core.config import Settings, get_settings
from refstyle.core.exceptions import StyleConfigurationError
from refstyle.core.logging import get_logger
from refstyle.formatters.common import push_comma_quote_aware
from refstyle.formatters.ieee.abbreviations import DEFAULT_TABLE_PATH, load_abbreviations
from refstyle.formatters.ieee.addons import WEB_KINDS, AddonsAssembler
from refstyle.formatters.ieee.authors import AuthorClauseBuilder
from refstyle.formatters.ieee.canonical import resolve_canonical
from refstyle.formatters.ieee.titles import CLOSE_QUOTE, TitleClauseBuilder
from refstyle.formatters.rich_text import Formatting, RichText
from refstyle.lang.casing import SentenceCase, TitleCase
from refstyle.lang.english import format_date
from refstyle.schemas.entry import Entry, EntryType, QualifiedUrl


logger = get_logger(__name__)

STYLE_NAME = "ieee"
DEFAULT_ET_AL_THRESHOLD = 6
DEFAULT_TITLE_CASE_MIN_LEN = 4

_SECTION_KINDS = (EntryType.CHAPTER, EntryType.SCENE)
_QUOTED_COMMA = "," + CLOSE_QUOTE


# =============================================================================
# Chapter / section walk
# =============================================================================

def walk_sections(entry: Entry) -> tuple[Entry, int | None, int | None]:
    """Climb untitled chapters and scenes to the first titled record.

    Returns:
        The record to format, the chapter number and the section number.
        The first numeric serial collected is the chapter; when more than
        one was collected the last is the section.
    """
    serials: list[str] = []

    while entry.title is None and entry.entry_type in _SECTION_KINDS:
        if entry.serial_number:
            serials.append(entry.serial_number)
        parent = entry.primary_parent
        if parent is None:
            break
        entry = parent

    if entry.entry_type == EntryType.CHAPTER and entry.serial_number:
        serials.append(entry.serial_number)

    numbers = []
    for serial in serials:
        if serial.isascii() and serial.isdigit():
            numbers.append(int(serial))
        else:
            logger.debug("serial_number_not_numeric", serial_number=serial)

    chapter = numbers[0] if numbers else None
    section = numbers[-1] if len(numbers) > 1 else None
    return entry, chapter, section


# =============================================================================
# IeeeFormatter
# =============================================================================

class IeeeFormatter:
    """Formats records as IEEE reference-list entries.

    Configuration is fixed at construction; the formatter holds no state
    between calls and can be shared across threads.

    Usage:
        formatter = IeeeFormatter()
        formatter.format(article).to_plain()
    """

    style = STYLE_NAME

    def __init__(
        self,
        et_al_threshold: int = DEFAULT_ET_AL_THRESHOLD,
        title_case: TitleCase | None = None,
        sentence_case: SentenceCase | None = None,
        abbreviations: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            et_al_threshold: Name count at which lists collapse to "et al."
                (0 never truncates)
            title_case: Title casing policy
            sentence_case: Sentence casing policy
            abbreviations: Journal-abbreviation table; defaults to the
                bundled table

        Raises:
            StyleConfigurationError: If et_al_threshold is negative
        """
        if et_al_threshold < 0:
            raise StyleConfigurationError(
                "et_al_threshold must be zero or positive",
                field="et_al_threshold",
                value=et_al_threshold,
                style=STYLE_NAME,
            )

        self.et_al_threshold = et_al_threshold
        self.title_case = title_case or TitleCase(
            always_capitalize_min_len=DEFAULT_TITLE_CASE_MIN_LEN
        )
        self.sentence_case = sentence_case or SentenceCase()
        self.abbreviations = (
            abbreviations if abbreviations is not None else load_abbreviations()
        )

        self.authors = AuthorClauseBuilder(et_al_threshold)
        self.titles = TitleClauseBuilder(
            self.title_case, self.sentence_case, self.abbreviations
        )
        self.addons = AddonsAssembler(et_al_threshold, self.abbreviations)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> IeeeFormatter:
        """Build a formatter from environment-backed settings."""
        settings = settings or get_settings()
        return cls(
            et_al_threshold=settings.et_al_threshold,
            title_case=TitleCase(
                always_capitalize_min_len=settings.title_case_min_len or None
            ),
            abbreviations=load_abbreviations(
                settings.abbreviations_path or DEFAULT_TABLE_PATH
            ),
        )

    def format(self, entry: Entry, prev: Entry | None = None) -> RichText:
        """Format one record.

        Args:
            entry: The record to format
            prev: The preceding record in the list; accepted for interface
                symmetry with list renderers and not used by this style

        Returns:
            The formatted reference as rich text.
        """
        entry, chapter, section = walk_sections(entry)

        url = entry.any_url()
        canonical = resolve_canonical(entry)
        kind = canonical.entry_type

        logger.debug(
            "canonical_parent_resolved",
            entry_type=entry.entry_type.value,
            canonical_type=kind.value,
            self_canonical=canonical is entry,
        )

        authors = self.authors.build(entry, canonical)
        title = self.titles.build(entry, canonical)
        addons = self.addons.build(entry, canonical, chapter, section)

        dated = kind == EntryType.LEGISLATION or (
            kind in (EntryType.CONFERENCE, EntryType.PATENT) and url is not None
        )

        res = RichText(authors)

        if kind == EntryType.LEGISLATION and isinstance(entry.edition, str) and entry.edition:
            if res:
                res.push(". ")
            res.push(entry.edition)

        if kind == EntryType.VIDEO:
            if canonical.location:
                if res:
                    res.push(", ")
                res.push(canonical.location)
        elif dated:
            date = entry.any_date()
            if date is not None:
                if res:
                    res.push(". ")
                res.push(f"({format_date(date)})")

        if res and title:
            res.push(". " if dated or kind == EntryType.VIDEO else ", ")
        res.extend(title)

        if addons:
            if len(res) > len(_QUOTED_COMMA) and res.endswith(_QUOTED_COMMA):
                res.truncate(len(_QUOTED_COMMA))
                res.push(CLOSE_QUOTE + " ")
            elif res:
                res.push(", ")
            res.push(", ".join(addons))

        push_comma_quote_aware(res, ".")

        if url is not None:
            self._push_url(res, url, kind)

        if entry.note:
            if res:
                res.push(" ")
            res.push(f"({entry.note})")

        return res

    def format_all(self, entries: Iterable[Entry]) -> list[RichText]:
        """Format a reference list, passing each record its predecessor."""
        res = []
        prev = None
        for entry in entries:
            res.append(self.format(entry, prev))
            prev = entry
        return res

    @staticmethod
    def _push_url(res: RichText, url: QualifiedUrl, kind: EntryType) -> None:
        if res:
            res.push(" ")

        if kind not in WEB_KINDS:
            if url.visit_date is not None:
                res.push(f"Accessed: {format_date(url.visit_date)}. ")
            res.push("[Online Video]" if kind == EntryType.VIDEO else "[Online]")
            res.push(". Available: ")
            res.push(url.value, Formatting.NO_HYPHENATION)
        else:
            res.push(url.value, Formatting.NO_HYPHENATION)
            if url.visit_date is not None:
                res.push(f" (accessed: {format_date(url.visit_date)}).")


@lru_cache
def get_formatter() -> IeeeFormatter:
    """Shared formatter built from the process settings."""
    return IeeeFormatter.from_settings()


def format_reference(entry: Entry, prev: Entry | None = None) -> RichText:
    """Format one record with the shared formatter."""
    return get_formatter().format(entry, prev)


__all__ = [
    "IeeeFormatter",
    "format_reference",
    "get_formatter",
    "walk_sections",
]
