"""Schemas package - bibliographic records and hierarchy queries."""

from refstyle.schemas.entry import (
    Date,
    Entry,
    EntryType,
    FormattableString,
    NumberRange,
    Person,
    PersonRole,
    PersonsWithRoles,
    QualifiedUrl,
)
from refstyle.schemas.selectors import Match, find_ancestor, find_parent, kinds


__all__ = [
    "Date",
    "Entry",
    "EntryType",
    "FormattableString",
    "Match",
    "NumberRange",
    "Person",
    "PersonRole",
    "PersonsWithRoles",
    "QualifiedUrl",
    "find_ancestor",
    "find_parent",
    "kinds",
]
