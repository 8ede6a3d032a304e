"""Bibliographic record schemas.

Models:
- EntryType: Closed taxonomy of record kinds
- Person / PersonRole / PersonsWithRoles: Contributors
- Date: Year with optional zero-indexed month and day
- NumberRange: Volume and page ranges
- FormattableString: Titles with optional pre-cased variants
- QualifiedUrl: URL with an optional visit date
- Entry: A bibliographic record and its parent hierarchy

All models are frozen. The formatting engine borrows entries for the
duration of one call and never mutates them; parents are shared references
and the hierarchy is assumed to be acyclic.

Anti-Pattern Compliance:
- No mutable default arguments (sequences are tuples defaulting to ())
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


# =============================================================================
# Enums
# =============================================================================

class EntryType(str, Enum):
    """Kinds of bibliographic records."""

    ARTICLE = "article"
    CHAPTER = "chapter"
    ENTRY = "entry"
    ANTHOS = "anthos"
    REPORT = "report"
    THESIS = "thesis"
    WEB = "web"
    SCENE = "scene"
    ARTWORK = "artwork"
    PATENT = "patent"
    CASE = "case"
    NEWSPAPER = "newspaper"
    LEGISLATION = "legislation"
    MANUSCRIPT = "manuscript"
    TWEET = "tweet"
    MISC = "misc"
    PERIODICAL = "periodical"
    PROCEEDINGS = "proceedings"
    BOOK = "book"
    BLOG = "blog"
    REFERENCE = "reference"
    CONFERENCE = "conference"
    ANTHOLOGY = "anthology"
    REPOSITORY = "repository"
    THREAD = "thread"
    VIDEO = "video"
    AUDIO = "audio"
    EXHIBITION = "exhibition"


class PersonRole(str, Enum):
    """Roles a person can hold besides author and editor."""

    TRANSLATOR = "translator"
    AFTERWORD = "afterword"
    FOREWORD = "foreword"
    INTRODUCTION = "introduction"
    ANNOTATOR = "annotator"
    COMMENTATOR = "commentator"
    HOLDER = "holder"
    COMPILER = "compiler"
    FOUNDER = "founder"
    COLLABORATOR = "collaborator"
    ORGANIZER = "organizer"
    CAST_MEMBER = "cast-member"
    COMPOSER = "composer"
    PRODUCER = "producer"
    EXECUTIVE_PRODUCER = "executive-producer"
    WRITER = "writer"
    CINEMATOGRAPHY = "cinematography"
    DIRECTOR = "director"
    ILLUSTRATOR = "illustrator"
    NARRATOR = "narrator"


# =============================================================================
# People
# =============================================================================

_NAME_SPLIT = re.compile(r"\s+")


class Person(BaseModel):
    """A contributor.

    Attributes:
        name: Family name, or the full name of an organization
        given_name: Given name(s), possibly already abbreviated ("A. B.")
        prefix: Particle printed before the family name ("van", "de")
        suffix: Generational suffix ("Jr.", "III")

    Example:
        >>> Person(name="Einstein", given_name="Albert").given_first()
        'A. Einstein'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Family name")
    given_name: str | None = Field(default=None, description="Given name(s)")
    prefix: str | None = Field(default=None, description="Name particle")
    suffix: str | None = Field(default=None, description="Generational suffix")

    def initials(self) -> str | None:
        """Abbreviate the given names to initials.

        Hyphenated names keep their hyphen: "Jean-Paul" becomes "J.-P.".
        """
        if not self.given_name:
            return None

        parts = []
        for word in _NAME_SPLIT.split(self.given_name.strip()):
            pieces = []
            for piece in word.split("-"):
                letter = next((c for c in piece if c.isalpha()), None)
                if letter is not None:
                    pieces.append(f"{letter}.")
            if pieces:
                parts.append("-".join(pieces))

        return " ".join(parts) or None

    def given_first(self, abbreviate: bool = True) -> str:
        """Render as "<given> <prefix> <name>, <suffix>"."""
        given = self.initials() if abbreviate else self.given_name
        res = " ".join(p for p in (given, self.prefix, self.name) if p)
        if self.suffix:
            res += f", {self.suffix}"
        return res


class PersonsWithRoles(BaseModel):
    """A group of people sharing one non-author role."""

    model_config = ConfigDict(frozen=True)

    names: tuple[Person, ...] = ()
    role: PersonRole


# =============================================================================
# Dates, ranges, strings, URLs
# =============================================================================

_DATE_RE = re.compile(r"^\s*(-?\d+)(?:-(\d{1,2})(?:-(\d{1,2}))?)?\s*$")


class Date(BaseModel):
    """A calendar date with optional month and day.

    Month and day are zero-indexed: January is 0 and the first of the
    month is 0. Rendering adds one to both.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int | None = Field(default=None, ge=0, le=11)
    day: int | None = Field(default=None, ge=0, le=30)

    @classmethod
    def parse(cls, value: str) -> Date:
        """Parse an ISO-like "YYYY", "YYYY-MM" or "YYYY-MM-DD" string.

        Raises:
            ValueError: If the string is not a date of that shape or its
                month or day is out of range.
        """
        match = _DATE_RE.match(value)
        if match is None:
            raise ValueError(f"Not a date: {value!r}")

        year, month, day = match.groups()
        return cls(
            year=int(year),
            month=int(month) - 1 if month else None,
            day=int(day) - 1 if day else None,
        )

    def display_year(self) -> str:
        """Render the year, marking years at or before zero as B.C.E."""
        if self.year > 0:
            return str(self.year)
        return f"{1 - self.year} B.C.E."


_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:[-–—]+\s*(\d+))?\s*$")


class NumberRange(BaseModel):
    """An inclusive numeric range such as a page span or volume run."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def end_not_before_start(self) -> NumberRange:
        """Validate that the range is not reversed."""
        if self.end < self.start:
            raise ValueError("Range end cannot precede its start")
        return self

    @classmethod
    def parse(cls, value: Any) -> NumberRange | None:
        """Build a range from an int, "10-15", "10–15" or a (start, end) pair.

        Returns None when the value has no numeric range shape or is
        reversed.
        """
        if isinstance(value, NumberRange):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(start=value, end=value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            try:
                start, end = (int(part) for part in value)
            except (TypeError, ValueError):
                return None
            if end < start:
                return None
            return cls(start=start, end=end)
        if isinstance(value, dict):
            try:
                return cls.model_validate(value)
            except ValidationError:
                return None
        if isinstance(value, str):
            match = _RANGE_RE.match(value)
            if match is None:
                return None
            start = int(match.group(1))
            end = int(match.group(2)) if match.group(2) else start
            if end < start:
                return None
            return cls(start=start, end=end)
        return None

    @property
    def is_single(self) -> bool:
        """Whether the range covers a single number."""
        return self.start == self.end


class FormattableString(BaseModel):
    """A string whose casing the formatter may change.

    Pre-cased variants take precedence over computed casing, and verbatim
    strings are never re-cased.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    short: str | None = None
    verbatim: bool = False
    title_case: str | None = None
    sentence_case: str | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_string(cls, data: Any) -> Any:
        """Accept a bare string in place of the full mapping."""
        if isinstance(data, str):
            return {"value": data}
        return data

    def as_title_case(self, casing: Any) -> str:
        """Render in title case using `casing` unless pre-cased or verbatim."""
        if self.verbatim:
            return self.value
        if self.title_case is not None:
            return self.title_case
        return casing.apply(self.value)

    def as_sentence_case(self, casing: Any) -> str:
        """Render in sentence case using `casing` unless pre-cased or verbatim."""
        if self.verbatim:
            return self.value
        if self.sentence_case is not None:
            return self.sentence_case
        return casing.apply(self.value)

    def __str__(self) -> str:
        return self.value


class QualifiedUrl(BaseModel):
    """A URL with the date it was last visited."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1)
    visit_date: Date | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_string(cls, data: Any) -> Any:
        """Accept a bare URL string in place of the full mapping."""
        if isinstance(data, str):
            return {"value": data}
        return data

    @property
    def host(self) -> str:
        """Lowercased host name, empty when the URL has none."""
        try:
            return httpx.URL(self.value).host.lower()
        except httpx.InvalidURL:
            return ""


# =============================================================================
# Entry
# =============================================================================

class Entry(BaseModel):
    """A bibliographic record.

    Every field except `entry_type` is optional. `parents` is ordered and
    its first element is the primary parent.

    Example:
        >>> journal = Entry(entry_type="periodical", title="Bar Journal", volume=3)
        >>> article = Entry(entry_type="article", title="Foo", parents=[journal])
        >>> article.primary_parent is journal
        True
    """

    model_config = ConfigDict(frozen=True)

    entry_type: EntryType

    title: FormattableString | None = None
    serial_number: str | None = None
    volume: NumberRange | None = None
    issue: int | str | None = None
    edition: int | str | None = None
    page_range: NumberRange | None = None
    location: str | None = None
    publisher: str | None = None
    organization: str | None = None
    language: str | None = Field(default=None, description="ISO 639-1 / BCP 47 code")
    archive: str | None = None
    doi: str | None = None
    note: str | None = None
    url: QualifiedUrl | None = None
    date: Date | None = None

    authors: tuple[Person, ...] = ()
    editors: tuple[Person, ...] = ()
    affiliated: tuple[PersonsWithRoles, ...] = ()

    parents: tuple[Entry, ...] = ()

    @field_validator("volume", "page_range", mode="before")
    @classmethod
    def coerce_range(cls, v: Any) -> NumberRange | None:
        """Accept ints and range strings; unparseable values become absent."""
        if v is None:
            return None
        return NumberRange.parse(v)

    @field_validator("edition", mode="before")
    @classmethod
    def coerce_edition(cls, v: Any) -> Any:
        """Treat numeric edition strings as numbers."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @field_validator("serial_number", mode="before")
    @classmethod
    def coerce_serial_number(cls, v: Any) -> Any:
        """Serial numbers are strings even when given as ints."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Any:
        """Accept ISO-like date strings and bare years; malformed dates become absent."""
        if isinstance(v, str):
            try:
                return Date.parse(v)
            except ValueError:
                return None
        if isinstance(v, int) and not isinstance(v, bool):
            return Date(year=v)
        return v

    @property
    def primary_parent(self) -> Entry | None:
        """The first parent, if any."""
        return self.parents[0] if self.parents else None

    def affiliated_filtered(self, role: PersonRole) -> list[Person]:
        """All affiliated people holding `role`, in declaration order."""
        return [
            person
            for group in self.affiliated
            if group.role == role
            for person in group.names
        ]

    def any_date(self) -> Date | None:
        """This entry's date, or the nearest one up the primary-first parent chain."""
        if self.date is not None:
            return self.date
        for parent in self.parents:
            date = parent.any_date()
            if date is not None:
                return date
        return None

    def any_url(self) -> QualifiedUrl | None:
        """This entry's URL, or the nearest one up the primary-first parent chain."""
        if self.url is not None:
            return self.url
        for parent in self.parents:
            url = parent.any_url()
            if url is not None:
                return url
        return None


__all__ = [
    "Date",
    "Entry",
    "EntryType",
    "FormattableString",
    "NumberRange",
    "Person",
    "PersonRole",
    "PersonsWithRoles",
    "QualifiedUrl",
]
