"""IEEE reference-list style.

Exports:
    - IeeeFormatter, format_reference: Full reference formatting
    - get_canonical_parent: Container resolution
    - AuthorClauseBuilder, TitleClauseBuilder, AddonsAssembler: Clause builders
    - abbreviate_journal, load_abbreviations: Abbreviation table
"""

from refstyle.formatters.ieee.abbreviations import abbreviate_journal, load_abbreviations
from refstyle.formatters.ieee.addons import AddonsAssembler
from refstyle.formatters.ieee.authors import AuthorClauseBuilder
from refstyle.formatters.ieee.canonical import get_canonical_parent, resolve_canonical
from refstyle.formatters.ieee.formatter import (
    IeeeFormatter,
    format_reference,
    get_formatter,
    walk_sections,
)
from refstyle.formatters.ieee.titles import TitleClauseBuilder


__all__ = [
    "AddonsAssembler",
    "AuthorClauseBuilder",
    "IeeeFormatter",
    "TitleClauseBuilder",
    "abbreviate_journal",
    "format_reference",
    "get_canonical_parent",
    "get_formatter",
    "load_abbreviations",
    "resolve_canonical",
    "walk_sections",
]
