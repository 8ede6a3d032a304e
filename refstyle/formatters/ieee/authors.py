"""Author clause for IEEE references.

Films list their directors, television series their executive producers,
and television episodes their directors and writers with inline role
labels. Everything else lists authors, falling back to the container's
authors and then to the record's editors.
"""

from __future__ import annotations

from refstyle.formatters.common import and_list, editors_label, name_list_straight
from refstyle.schemas.entry import Entry, EntryType, PersonRole
from refstyle.schemas.selectors import find_parent, kinds


# An episode carries its season (volume) and number (issue) below a Video.
_EPISODE = kinds(EntryType.VIDEO, fields=("issue", "volume"))
_SERIES = kinds(EntryType.VIDEO)


def is_tv_episode(entry: Entry) -> bool:
    return _EPISODE.matches(entry) and find_parent(entry, _SERIES) is not None


class AuthorClauseBuilder:
    """Builds the leading contributor clause.

    Attributes:
        et_al_threshold: Name count at which lists are truncated (0 disables)
    """

    def __init__(self, et_al_threshold: int = 6) -> None:
        self.et_al_threshold = et_al_threshold

    def build(self, entry: Entry, canonical: Entry) -> str:
        """Return the author clause, or "" when nobody can be credited."""
        if entry.entry_type == EntryType.VIDEO:
            clause = self._video(entry)
            if clause is not None:
                return clause

        authors = entry.authors or canonical.authors
        if authors:
            return and_list(name_list_straight(authors), self.et_al_threshold)

        if entry.editors:
            names = and_list(name_list_straight(entry.editors), self.et_al_threshold)
            return f"{names}, {editors_label(len(entry.editors))}"

        return ""

    def _video(self, entry: Entry) -> str | None:
        directors = entry.affiliated_filtered(PersonRole.DIRECTOR)

        if is_tv_episode(entry):
            if not directors:
                return None
            writers = entry.affiliated_filtered(PersonRole.WRITER)
            names = [f"{name} (Director)" for name in name_list_straight(directors)]
            names += [f"{name} (Writer)" for name in name_list_straight(writers)]
            return and_list(names, self.et_al_threshold)

        if directors:
            label = "Director" if len(directors) == 1 else "Directors"
            names = and_list(name_list_straight(directors), self.et_al_threshold)
            return f"{names}, {label}"

        producers = entry.affiliated_filtered(PersonRole.EXECUTIVE_PRODUCER)
        if producers:
            label = "Executive Prod" if len(producers) == 1 else "Executive Prods"
            names = and_list(name_list_straight(producers), self.et_al_threshold)
            return f"{names}, {label}"

        return None


__all__ = [
    "AuthorClauseBuilder",
    "is_tv_episode",
]
