"""Journal and institution abbreviation table.

The table is a YAML mapping of full titles to their IEEE abbreviations.
It is loaded once per path, validated, and treated as read-only for the
rest of the process. Titles without an entry are returned unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

from refstyle.core.exceptions import AbbreviationTableError
from refstyle.core.logging import get_logger


logger = get_logger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent / "data" / "journal_abbreviations.yaml"


def _normalize(title: str) -> str:
    return " ".join(title.split()).casefold()


@lru_cache
def load_abbreviations(path: Path = DEFAULT_TABLE_PATH) -> Mapping[str, str]:
    """Load an abbreviation table.

    Args:
        path: YAML file mapping full titles to abbreviations

    Returns:
        Read-only mapping keyed by the case-folded full title.

    Raises:
        AbbreviationTableError: If the file is missing, is not valid YAML,
            or is not a mapping of strings to strings.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise AbbreviationTableError(
            f"Cannot read abbreviation table: {e}", path=path, cause=e, style="ieee"
        ) from e
    except yaml.YAMLError as e:
        raise AbbreviationTableError(
            f"Invalid YAML in abbreviation table: {e}", path=path, cause=e, style="ieee"
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise AbbreviationTableError(
            "Abbreviation table must be a mapping", path=path, style="ieee"
        )

    table: dict[str, str] = {}
    for full, abbr in data.items():
        if not isinstance(full, str) or not isinstance(abbr, str):
            raise AbbreviationTableError(
                f"Abbreviation entries must be strings, got {full!r}: {abbr!r}",
                path=path,
                style="ieee",
            )
        table[_normalize(full)] = abbr

    logger.debug("abbreviation_table_loaded", path=str(path), entries=len(table))
    return MappingProxyType(table)


def abbreviate_journal(title: str, table: Mapping[str, str] | None = None) -> str:
    """Abbreviate a container or institution title.

    Example:
        >>> abbreviate_journal("Proceedings of the IEEE")
        'Proc. IEEE'
        >>> abbreviate_journal("Bar Journal")
        'Bar Journal'
    """
    if table is None:
        table = load_abbreviations()
    return table.get(_normalize(title), title)


__all__ = [
    "DEFAULT_TABLE_PATH",
    "abbreviate_journal",
    "load_abbreviations",
]
