"""Trailing descriptive fields ("addons") for IEEE references.

Addons are short fragments such as "vol. 3", "pp. 10-15" or
"doi: 10.1109/5.771073" that follow the title clause, joined by ", ".

Which fragments appear, and in which order, depends first on the kind of
the canonical parent, then on two structural shapes (preprints directly
inside a repository, pages directly inside a website or blog), then on
the record's own kind, with a general fallback for everything else.

Every `EntryType` is either a key of `CANONICAL_HANDLERS` or a member of
`CANONICAL_FALLBACK_KINDS`; the unit tests hold the two sets to a
partition of the enum so a new kind cannot slip through unhandled.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from refstyle.formatters.common import (
    and_list,
    editors_label,
    foreign_language_name,
    format_edition,
    format_range,
    name_list_straight,
)
from refstyle.formatters.ieee.abbreviations import abbreviate_journal
from refstyle.lang.english import format_date, format_month_day
from refstyle.schemas.entry import Entry, EntryType, Person
from refstyle.schemas.selectors import find_parent, kinds


# =============================================================================
# Dispatch tables
# =============================================================================

AddonHandler = Callable[["AddonsAssembler", Entry, Entry], list[str]]

# Canonical kinds without a dedicated rule; these go through the shape
# checks and then the fallback.
CANONICAL_FALLBACK_KINDS = frozenset(
    {
        EntryType.ARTICLE,
        EntryType.CHAPTER,
        EntryType.ENTRY,
        EntryType.ANTHOS,
        EntryType.WEB,
        EntryType.SCENE,
        EntryType.ARTWORK,
        EntryType.CASE,
        EntryType.NEWSPAPER,
        EntryType.TWEET,
        EntryType.MISC,
        EntryType.BOOK,
        EntryType.BLOG,
        EntryType.ANTHOLOGY,
        EntryType.THREAD,
        EntryType.AUDIO,
        EntryType.EXHIBITION,
    }
)

PREPRINT_KINDS = frozenset({EntryType.ARTICLE, EntryType.BOOK, EntryType.ANTHOS})
WEB_KINDS = frozenset({EntryType.WEB, EntryType.BLOG})

_REPOSITORY = kinds(EntryType.REPOSITORY)
_WEBSITE = kinds(EntryType.WEB, EntryType.BLOG)

ARXIV_HOST = "arxiv.org"


class AddonsAssembler:
    """Builds the ordered list of addon fragments.

    Attributes:
        et_al_threshold: Name count at which editor lists are truncated
        abbreviations: Full title to abbreviation table (thesis institutions)
    """

    def __init__(self, et_al_threshold: int, abbreviations: Mapping[str, str]) -> None:
        self.et_al_threshold = et_al_threshold
        self.abbreviations = abbreviations

    def build(
        self,
        entry: Entry,
        canonical: Entry,
        chapter: int | None = None,
        section: int | None = None,
    ) -> list[str]:
        """Return the addon fragments in output order."""
        handler = CANONICAL_HANDLERS.get(canonical.entry_type)
        if handler is not None:
            return handler(self, entry, canonical)

        if entry.entry_type in PREPRINT_KINDS:
            repository = find_parent(entry, _REPOSITORY)
            if repository is not None:
                return self._preprint(entry, repository)

        if entry.entry_type in WEB_KINDS:
            return self._web(entry)

        website = find_parent(entry, _WEBSITE)
        if website is not None:
            return self._web_parented(entry, website)

        return self._fallback(entry, canonical, chapter, section)

    # -------------------------------------------------------------------------
    # Shared fragments
    # -------------------------------------------------------------------------

    def _editors(self, editors: tuple[Person, ...]) -> str:
        names = and_list(name_list_straight(editors), self.et_al_threshold)
        return f"{names}, {editors_label(len(editors))}"

    @staticmethod
    def _publisher(entry: Entry, canonical: Entry) -> str | None:
        """"<location>: <publisher> (in <Language>)" from the canonical parent."""
        publisher = canonical.publisher or canonical.organization
        if not publisher:
            return None

        res = f"{canonical.location}: {publisher}" if canonical.location else publisher
        language = foreign_language_name(entry.language, canonical.language)
        if language is not None:
            res += f" (in {language})"
        return res

    @staticmethod
    def _has_url(entry: Entry) -> bool:
        return entry.any_url() is not None

    # -------------------------------------------------------------------------
    # Canonical-kind rules
    # -------------------------------------------------------------------------

    def _proceedings(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []
        conference = canonical.entry_type == EntryType.CONFERENCE

        if not conference:
            if canonical.editors:
                res.append(self._editors(canonical.editors))

            volume = entry.volume or canonical.volume
            if volume is not None:
                res.append(format_range("vol.", "vols.", volume))

            edition = format_edition(canonical.edition)
            if edition:
                res.append(edition)

        if canonical.location:
            res.append(canonical.location)

        if not (conference and self._has_url(entry)):
            date = entry.any_date()
            if date is not None:
                res.append(format_date(date))

        if conference:
            if entry.serial_number:
                res.append(f"Paper {entry.serial_number}")
        else:
            if entry.page_range is not None:
                res.append(format_range("p.", "pp.", entry.page_range))
            if entry.doi:
                res.append(f"doi: {entry.doi}")

        return res

    def _reference(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []
        date = entry.any_date()
        date_text = format_date(date) if date is not None else None

        edition = format_edition(canonical.edition)
        if edition:
            res.append(edition)

        if self._has_url(entry):
            if date_text:
                res.append(f"({date_text})")
            return res

        publisher = canonical.organization or canonical.publisher
        if publisher:
            res.append(publisher)
            if canonical.location:
                res.append(canonical.location)

        if date_text:
            res.append(date_text)

        if entry.page_range is not None:
            res.append(format_range("p.", "pp.", entry.page_range))

        return res

    def _repository(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []

        if canonical.serial_number:
            res.append(f"(version {canonical.serial_number})")
        else:
            date = canonical.date or entry.any_date()
            if date is not None:
                res.append(f"({date.display_year()})")

        publisher = self._publisher(entry, canonical)
        if publisher:
            res.append(publisher)

        return res

    def _video(self, entry: Entry, canonical: Entry) -> list[str]:
        date = canonical.date or entry.any_date()
        if date is None:
            return []
        return [f"({date.display_year()})"]

    def _patent(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []
        patent = " ".join(
            part for part in (canonical.location, "Patent", canonical.serial_number) if part
        )
        date = entry.any_date()

        if self._has_url(entry):
            prefix = ""
            if date is not None:
                month_day = format_month_day(date)
                prefix = f"({date.display_year()}"
                if month_day:
                    prefix += f", {month_day}"
                prefix += "). "
            res.append(prefix + patent)
        else:
            res.append(patent)
            if date is not None:
                res.append(format_date(date))

        return res

    def _periodical(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []

        if canonical.volume is not None:
            res.append(format_range("vol.", "vols.", canonical.volume))

        if canonical.issue is not None:
            res.append(f"no. {canonical.issue}")

        if entry.page_range is not None:
            res.append(format_range("p.", "pp.", entry.page_range))
        elif entry.serial_number:
            res.append(f"Art. no. {entry.serial_number}")

        date = entry.any_date()
        if date is not None:
            res.append(format_date(date))

        if entry.doi:
            res.append(f"doi: {entry.doi}")

        return res

    def _report(self, entry: Entry, canonical: Entry) -> list[str]:
        res = []
        has_url = self._has_url(entry)

        publisher = canonical.organization or canonical.publisher
        if publisher:
            res.append(publisher)
            if canonical.location:
                res.append(canonical.location)

        if canonical.serial_number:
            res.append(f"Rep. {canonical.serial_number}")

        date = entry.any_date()
        date_text = format_date(date) if date is not None else None

        if date_text and not has_url:
            res.append(date_text)

        volume = canonical.volume or entry.volume
        if volume is not None:
            res.append(format_range("vol.", "vols.", volume))

        if canonical.issue is not None:
            res.append(f"no. {canonical.issue}")

        if date_text and has_url:
            res.append(date_text)

        return res

    def _thesis(self, entry: Entry, canonical: Entry) -> list[str]:
        res = ["Thesis"]

        if canonical.organization:
            res.append(abbreviate_journal(canonical.organization, self.abbreviations))
            if canonical.location:
                res.append(canonical.location)

        if entry.serial_number:
            res.append(entry.serial_number)

        date = entry.any_date()
        if date is not None:
            res.append(date.display_year())

        return res

    def _legislation(self, entry: Entry, canonical: Entry) -> list[str]:
        return []

    def _manuscript(self, entry: Entry, canonical: Entry) -> list[str]:
        return ["unpublished"]

    # -------------------------------------------------------------------------
    # Shape and entry-kind rules
    # -------------------------------------------------------------------------

    def _preprint(self, entry: Entry, repository: Entry) -> list[str]:
        res = []

        if entry.serial_number:
            serial = entry.serial_number
            url = entry.any_url()
            if url is not None and "arxiv" not in serial.lower():
                titled_arxiv = (
                    repository.title is not None
                    and repository.title.value.lower() == "arxiv"
                )
                if url.host == ARXIV_HOST or titled_arxiv:
                    serial = f"arXiv: {serial}"

            archive = entry.archive or repository.archive
            if archive:
                serial += f" [{archive}]"

            res.append(serial)

        date = entry.any_date()
        if date is not None:
            res.append(format_date(date))

        return res

    def _web(self, entry: Entry) -> list[str]:
        publisher = entry.publisher or entry.organization
        return [publisher] if publisher else []

    def _web_parented(self, entry: Entry, website: Entry) -> list[str]:
        candidates = (
            website.title.value if website.title is not None else None,
            website.publisher,
            entry.publisher,
            website.organization,
            entry.organization,
        )
        source = next((c for c in candidates if c), None)
        return [source] if source else []

    def _fallback(
        self,
        entry: Entry,
        canonical: Entry,
        chapter: int | None,
        section: int | None,
    ) -> list[str]:
        res = []

        editors = entry.editors or canonical.editors
        if entry.authors and editors:
            res.append(self._editors(editors))

        volume = entry.volume or canonical.volume
        if volume is not None:
            res.append(format_range("vol.", "vols.", volume))

        edition = format_edition(canonical.edition)
        if edition:
            res.append(edition)

        publisher = self._publisher(entry, canonical)
        if publisher:
            res.append(publisher)

        date = canonical.any_date()
        if date is not None:
            res.append(date.display_year())

        if chapter is not None:
            res.append(f"ch. {chapter}")

        if section is not None:
            res.append(f"sec. {section}")

        if entry.page_range is not None:
            res.append(format_range("p.", "pp.", entry.page_range))

        return res


# Dedicated rules per canonical kind.
CANONICAL_HANDLERS: dict[EntryType, AddonHandler] = {
    EntryType.CONFERENCE: AddonsAssembler._proceedings,
    EntryType.PROCEEDINGS: AddonsAssembler._proceedings,
    EntryType.REFERENCE: AddonsAssembler._reference,
    EntryType.REPOSITORY: AddonsAssembler._repository,
    EntryType.VIDEO: AddonsAssembler._video,
    EntryType.PATENT: AddonsAssembler._patent,
    EntryType.PERIODICAL: AddonsAssembler._periodical,
    EntryType.REPORT: AddonsAssembler._report,
    EntryType.THESIS: AddonsAssembler._thesis,
    EntryType.LEGISLATION: AddonsAssembler._legislation,
    EntryType.MANUSCRIPT: AddonsAssembler._manuscript,
}


__all__ = [
    "CANONICAL_FALLBACK_KINDS",
    "CANONICAL_HANDLERS",
    "AddonsAssembler",
]
