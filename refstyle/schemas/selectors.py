"""Hierarchical entry queries.

Small declarative patterns over the immutable parent tree. A `Match`
describes one node (its kinds and the fields it must carry); the lookup
functions return the first node that satisfies it.

Lookups are pure: they only read entries and recurse as deep as the tree,
relying on the data layer to keep the hierarchy acyclic.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from refstyle.schemas.entry import Entry, EntryType


@dataclass(frozen=True, slots=True)
class Match:
    """A single-node pattern.

    Attributes:
        kinds: Accepted entry types; empty accepts any kind
        fields: Entry attributes that must be present (not None)

    Example:
        >>> series = Match((EntryType.ANTHOLOGY,), fields=("title",))
    """

    kinds: tuple[EntryType, ...] = ()
    fields: tuple[str, ...] = ()

    def matches(self, entry: Entry) -> bool:
        """Whether `entry` satisfies this pattern."""
        if self.kinds and entry.entry_type not in self.kinds:
            return False
        return all(getattr(entry, name) is not None for name in self.fields)


def kinds(*entry_types: EntryType, fields: tuple[str, ...] = ()) -> Match:
    """Shorthand for building a Match from positional kinds."""
    return Match(tuple(entry_types), fields)


def find_parent(entry: Entry, pattern: Match) -> Entry | None:
    """Return the first direct parent matching `pattern`."""
    for parent in entry.parents:
        if pattern.matches(parent):
            return parent
    return None


def iter_ancestors(entry: Entry) -> Iterator[Entry]:
    """Yield ancestors level by level, parents in declaration order."""
    level = list(entry.parents)
    while level:
        yield from level
        level = [grandparent for parent in level for grandparent in parent.parents]


def find_ancestor(entry: Entry, pattern: Match) -> Entry | None:
    """Return the nearest ancestor matching `pattern`."""
    for ancestor in iter_ancestors(entry):
        if pattern.matches(ancestor):
            return ancestor
    return None


__all__ = [
    "Match",
    "find_ancestor",
    "find_parent",
    "iter_ancestors",
    "kinds",
]
