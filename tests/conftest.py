"""Test configuration and shared fixtures.

Pattern: Pytest fixtures, conftest.py
Anti-Pattern Avoided: Fixture reuse without explicit scope
"""

import pytest

from refstyle.core.config import Settings, get_settings
from refstyle.formatters.ieee import IeeeFormatter
from refstyle.lang.casing import SentenceCase, TitleCase
from refstyle.schemas.entry import Entry, EntryType, Person


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with safe defaults."""
    return Settings(
        environment="test",
        log_level="DEBUG",
        et_al_threshold=6,
        title_case_min_len=4,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Formatter Fixtures
# ============================================================================

@pytest.fixture
def formatter() -> IeeeFormatter:
    """IEEE formatter with default configuration and the bundled table."""
    return IeeeFormatter()


@pytest.fixture
def title_case() -> TitleCase:
    return TitleCase()


@pytest.fixture
def sentence_case() -> SentenceCase:
    return SentenceCase()


# ============================================================================
# Record Fixtures
# ============================================================================

@pytest.fixture
def author() -> Person:
    return Person(name="Author", given_name="A.")


@pytest.fixture
def journal() -> Entry:
    """Periodical with volume and issue."""
    return Entry(
        entry_type=EntryType.PERIODICAL,
        title="Bar Journal",
        volume=3,
        issue=2,
    )


@pytest.fixture
def article(journal: Entry, author: Person) -> Entry:
    """Article inside `journal` with pages and a month-precision date."""
    return Entry(
        entry_type=EntryType.ARTICLE,
        title="Foo",
        authors=[author],
        date="2020-03",
        page_range="10-15",
        parents=[journal],
    )


@pytest.fixture
def conference() -> Entry:
    return Entry(
        entry_type=EntryType.CONFERENCE,
        title="International Conference on Machine Learning",
        location="Vienna, Austria",
        date="2020-07-13",
    )


@pytest.fixture
def book() -> Entry:
    """Standalone multi-volume book."""
    return Entry(
        entry_type=EntryType.BOOK,
        title="the art of computer programming",
        authors=[Person(name="Knuth", given_name="Donald Ervin")],
        edition=3,
        volume=1,
        publisher="Addison-Wesley",
        location="Reading, MA",
        date=1997,
    )
