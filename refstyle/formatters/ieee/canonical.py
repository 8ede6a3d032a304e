"""Canonical parent resolution.

The canonical parent is the record that supplies container-level facts
(volume, publisher, conference identity). The formatted record itself
still supplies its own pages, DOI and serial number.
"""

from __future__ import annotations

from refstyle.schemas.entry import Entry, EntryType
from refstyle.schemas.selectors import find_ancestor, find_parent, kinds


_SECTION_KINDS = (EntryType.CHAPTER, EntryType.SCENE, EntryType.WEB)

_ANTHOLOGY = kinds(EntryType.ANTHOLOGY)
_REFERENCE_WORK = kinds(EntryType.REFERENCE, EntryType.REPOSITORY)
_PROCEEDINGS = kinds(EntryType.CONFERENCE, EntryType.PROCEEDINGS)
_PERIODICAL = kinds(EntryType.PERIODICAL)


def get_canonical_parent(entry: Entry) -> Entry | None:
    """Return the ancestor supplying container-level facts, if any.

    Rules, first match wins:
    1. Chapters, scenes and web pages use their primary parent.
    2. An anthos uses the nearest enclosing anthology.
    3. A generic entry uses the nearest reference work or repository.
    4. Anything inside a conference or proceedings uses that container.
    5. Anything directly inside a periodical uses that periodical.
    """
    if entry.entry_type in _SECTION_KINDS and entry.parents:
        return entry.parents[0]

    if entry.entry_type == EntryType.ANTHOS:
        anthology = find_ancestor(entry, _ANTHOLOGY)
        if anthology is not None:
            return anthology

    if entry.entry_type == EntryType.ENTRY:
        work = find_ancestor(entry, _REFERENCE_WORK)
        if work is not None:
            return work

    proceedings = find_ancestor(entry, _PROCEEDINGS)
    if proceedings is not None:
        return proceedings

    return find_parent(entry, _PERIODICAL)


def resolve_canonical(entry: Entry) -> Entry:
    """The canonical parent, or `entry` itself when none applies."""
    parent = get_canonical_parent(entry)
    return parent if parent is not None else entry


__all__ = [
    "get_canonical_parent",
    "resolve_canonical",
]
