"""Unit tests for the IEEE reference formatter.

IEEE reference-list format for a journal article:
A. Author, "Title of article," Abbrev. Title of Periodical, vol. x, no. x, pp. xxx-xxx, Abbrev. Month, year.
"""

from unittest.mock import patch

import pytest

from refstyle.core.config import Settings
from refstyle.core.exceptions import StyleConfigurationError
from refstyle.formatters.ieee import IeeeFormatter, format_reference, get_formatter
from refstyle.formatters.ieee.formatter import walk_sections
from refstyle.formatters.rich_text import Formatting, TextRun
from refstyle.schemas.entry import (
    Date,
    Entry,
    EntryType,
    Person,
    PersonRole,
    PersonsWithRoles,
    QualifiedUrl,
)


class TestIeeeFormatterInit:
    """Tests for formatter construction."""

    def test_defaults(self, formatter: IeeeFormatter) -> None:
        assert formatter.et_al_threshold == 6
        assert formatter.title_case.always_capitalize_min_len == 4
        assert formatter.style == "ieee"

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(StyleConfigurationError) as exc_info:
            IeeeFormatter(et_al_threshold=-1)

        assert exc_info.value.field == "et_al_threshold"
        assert exc_info.value.value == -1

    def test_from_settings(self, test_settings: Settings) -> None:
        settings = test_settings.model_copy(
            update={"et_al_threshold": 3, "title_case_min_len": 0}
        )

        formatter = IeeeFormatter.from_settings(settings)

        assert formatter.et_al_threshold == 3
        assert formatter.title_case.always_capitalize_min_len is None

    def test_custom_abbreviations(self, article: Entry) -> None:
        formatter = IeeeFormatter(abbreviations={"bar journal": "Bar J."})

        assert "“Foo,” Bar J., vol. 3" in formatter.format(article).value


class TestArticles:
    """Tests for periodical articles."""

    def test_article_in_periodical(self, formatter: IeeeFormatter, article: Entry) -> None:
        result = formatter.format(article)

        assert result.value == (
            "A. Author, “Foo,” Bar Journal, vol. 3, no. 2, pp. 10-15, Mar. 2020."
        )
        assert result.runs == (
            TextRun("A. Author, “Foo,” "),
            TextRun("Bar Journal", frozenset({Formatting.ITALIC})),
            TextRun(", vol. 3, no. 2, pp. 10-15, Mar. 2020."),
        )

    def test_note_appended(self, formatter: IeeeFormatter, article: Entry) -> None:
        annotated = article.model_copy(update={"note": "to be published"})

        assert formatter.format(annotated).value.endswith(
            "Mar. 2020. (to be published)"
        )

    def test_et_al(self, formatter: IeeeFormatter, journal: Entry) -> None:
        people = [Person(name=f"Name{i}", given_name=chr(65 + i)) for i in range(7)]
        article = Entry(
            entry_type=EntryType.ARTICLE, title="Foo", authors=people, parents=[journal]
        )

        assert formatter.format(article).value.startswith("A. Name0, B. Name1, et al., “Foo,”")

    def test_prev_is_ignored(self, formatter: IeeeFormatter, article: Entry, book: Entry) -> None:
        assert formatter.format(article, prev=book) == formatter.format(article)


class TestConferencesAndProceedings:
    """Tests for conference papers and proceedings."""

    def test_conference_paper(self, formatter: IeeeFormatter, conference: Entry) -> None:
        paper = Entry(
            entry_type=EntryType.ARTICLE,
            title="Deep Nets",
            authors=[Person(name="Doe", given_name="Jane")],
            serial_number="42",
            parents=[conference],
        )

        assert formatter.format(paper).value == (
            "J. Doe, Deep nets. Presented at Int. Conf. Mach. Learn., "
            "Vienna, Austria, July 13, 2020, Paper 42."
        )

    def test_conference_paper_with_url(
        self, formatter: IeeeFormatter, conference: Entry
    ) -> None:
        paper = Entry(
            entry_type=EntryType.ARTICLE,
            title="Deep nets",
            authors=[Person(name="Doe", given_name="Jane")],
            serial_number="42",
            url=QualifiedUrl(
                value="https://icml.cc/paper42",
                visit_date=Date(year=2021, month=0, day=1),
            ),
            parents=[conference],
        )

        assert formatter.format(paper).value == (
            "J. Doe. (July 13, 2020). Deep nets. Presented at Int. Conf. Mach. Learn., "
            "Vienna, Austria, Paper 42. Accessed: Jan. 2, 2021. [Online]. "
            "Available: https://icml.cc/paper42"
        )

    def test_url_is_not_hyphenated(self, formatter: IeeeFormatter, conference: Entry) -> None:
        paper = Entry(
            entry_type=EntryType.ARTICLE,
            title="Deep nets",
            url="https://icml.cc/paper42",
            parents=[conference],
        )

        last = formatter.format(paper).runs[-1]

        assert last == TextRun(
            "https://icml.cc/paper42", frozenset({Formatting.NO_HYPHENATION})
        )

    def test_proceedings_paper(self, formatter: IeeeFormatter) -> None:
        proceedings = Entry(
            entry_type=EntryType.PROCEEDINGS,
            title="Advances in Neural Information Processing Systems",
            editors=[Person(name="Smith", given_name="Ann")],
            volume=33,
            location="Vancouver, Canada",
            date=2020,
        )
        paper = Entry(
            entry_type=EntryType.ARTICLE,
            title="Attention sinks",
            authors=[Person(name="Lee", given_name="Bo")],
            page_range="100-110",
            doi="10.1/x",
            parents=[proceedings],
        )

        assert formatter.format(paper).value == (
            "B. Lee, “Attention sinks,” in Adv. Neural Inf. Process. Syst., "
            "A. Smith, Ed., vol. 33, Vancouver, Canada, 2020, pp. 100-110, doi: 10.1/x."
        )


class TestBooks:
    """Tests for books, chapters and anthologies."""

    def test_book(self, formatter: IeeeFormatter, book: Entry) -> None:
        result = formatter.format(book)

        assert result.value == (
            "D. E. Knuth, The Art of Computer Programming, vol. 1, 3rd ed., "
            "Reading, MA: Addison-Wesley, 1997."
        )
        assert TextRun(
            "The Art of Computer Programming", frozenset({Formatting.ITALIC})
        ) in result.runs

    def test_untitled_chapter_number(self, formatter: IeeeFormatter, book: Entry) -> None:
        chapter = Entry(entry_type=EntryType.CHAPTER, serial_number="3", parents=[book])

        assert formatter.format(chapter).value.endswith("Addison-Wesley, 1997, ch. 3.")

    def test_chapter_in_edited_book(self, formatter: IeeeFormatter) -> None:
        book = Entry(
            entry_type=EntryType.BOOK,
            title="Algorithms Unlocked",
            editors=[Person(name="Editor", given_name="Eve")],
            publisher="MIT Press",
            location="Boston",
            date=2013,
        )
        chapter = Entry(
            entry_type=EntryType.CHAPTER,
            title="Sorting",
            authors=[Person(name="Writer", given_name="Ann")],
            page_range="1-20",
            parents=[book],
        )

        assert formatter.format(chapter).value == (
            "A. Writer, “Sorting,” in Algorithms Unlocked, E. Editor, Ed., "
            "Boston: MIT Press, 2013, pp. 1-20."
        )

    def test_anthos(self, formatter: IeeeFormatter) -> None:
        series = Entry(entry_type=EntryType.ANTHOLOGY, title="Lecture Notes", issue=5)
        anthology = Entry(
            entry_type=EntryType.ANTHOLOGY,
            title="Collected Works",
            publisher="Springer",
            location="Berlin",
            date=2005,
            parents=[series],
        )
        poem = Entry(
            entry_type=EntryType.ANTHOS,
            title="A poem",
            authors=[Person(name="Poet", given_name="Pat")],
            parents=[anthology],
        )

        assert formatter.format(poem).value == (
            "P. Poet, “A poem,” in Collected Works (Lecture Notes, no. 5), "
            "Berlin: Springer, 2005."
        )

    def test_reference_entry(self, formatter: IeeeFormatter) -> None:
        encyclopedia = Entry(
            entry_type=EntryType.REFERENCE,
            title="Encyclopedia of things",
            publisher="Oxford Univ. Press",
            location="Oxford",
            edition=2,
        )
        item = Entry(
            entry_type=EntryType.ENTRY,
            title="Graph",
            page_range="12-14",
            date=2010,
            parents=[encyclopedia],
        )

        assert formatter.format(item).value == (
            "“Graph,” in Encyclopedia of Things, 2nd ed., Oxford Univ. Press, "
            "Oxford, 2010, pp. 12-14."
        )


class TestQuotedTitleBeforeAddons:
    """Tests for the closing-quote fix-up before addons."""

    def test_comma_dropped_before_addons(self, formatter: IeeeFormatter) -> None:
        thesis = Entry(
            entry_type=EntryType.THESIS,
            title="On learning",
            authors=[Person(name="Student", given_name="Cam")],
            organization="Stanford University",
            location="Stanford, CA",
            date=2015,
        )

        assert formatter.format(thesis).value == (
            "C. Student, “On learning” Thesis, Stanford Univ., Stanford, CA, 2015."
        )

    def test_quote_closed_with_period_without_addons(self, formatter: IeeeFormatter) -> None:
        misc = Entry(
            entry_type=EntryType.MISC,
            title="Untitled thoughts",
            authors=[Person(name="Writer", given_name="Ann")],
        )

        assert formatter.format(misc).value == "A. Writer, “Untitled thoughts.”"

    def test_never_comma_quote_followed_by_addon(self, formatter: IeeeFormatter) -> None:
        manuscript = Entry(
            entry_type=EntryType.MANUSCRIPT,
            title="Notes on things",
            authors=[Person(name="Turing", given_name="Alan")],
        )

        result = formatter.format(manuscript).value

        assert result == "A. Turing, “Notes on things” unpublished."
        assert ",” unpublished" not in result


class TestOtherKinds:
    """Tests for patents, reports, legislation, preprints, video and web."""

    def test_patent(self, formatter: IeeeFormatter) -> None:
        patent = Entry(
            entry_type=EntryType.PATENT,
            title="Widget",
            authors=[Person(name="Inventor", given_name="Ivy")],
            location="US",
            serial_number="1234567",
            date="2001-05-08",
        )

        assert formatter.format(patent).value == (
            "I. Inventor, “Widget” US Patent 1234567, May 8, 2001."
        )

    def test_report(self, formatter: IeeeFormatter) -> None:
        report = Entry(
            entry_type=EntryType.REPORT,
            title="Annual summary",
            authors=[Person(name="Lee", given_name="Kim")],
            organization="NASA",
            location="Washington, DC",
            serial_number="TR-17",
            date="2019-11",
        )

        assert formatter.format(report).value == (
            "K. Lee, “Annual summary” NASA, Washington, DC, Rep. TR-17, Nov. 2019."
        )

    def test_legislation(self, formatter: IeeeFormatter) -> None:
        law = Entry(
            entry_type=EntryType.LEGISLATION,
            title="patriot act",
            serial_number="Pub. L. 107-56",
            edition="107th Congress",
            date=2001,
        )

        assert formatter.format(law).value == (
            "107th Congress. (2001). Pub. L. 107-56, Patriot Act."
        )

    def test_preprint(self, formatter: IeeeFormatter) -> None:
        repository = Entry(entry_type=EntryType.REPOSITORY, title="arXiv")
        preprint = Entry(
            entry_type=EntryType.ARTICLE,
            title="Scaling laws",
            authors=[Person(name="Kaplan", given_name="Jared")],
            serial_number="2001.08361",
            archive="cs.LG",
            url="https://arxiv.org/abs/2001.08361",
            date="2020-01",
            parents=[repository],
        )

        assert formatter.format(preprint).value == (
            "J. Kaplan, “Scaling laws” arXiv: 2001.08361 [cs.LG], Jan. 2020. "
            "[Online]. Available: https://arxiv.org/abs/2001.08361"
        )

    def test_film(self, formatter: IeeeFormatter) -> None:
        film = Entry(
            entry_type=EntryType.VIDEO,
            title="Metropolis",
            location="Germany",
            date=1927,
            affiliated=[
                PersonsWithRoles(
                    role=PersonRole.DIRECTOR,
                    names=[Person(name="Lang", given_name="Fritz")],
                )
            ],
            url="https://archive.example.org/metropolis",
        )

        assert formatter.format(film).value == (
            "F. Lang, Director, Germany. Metropolis, (1927). [Online Video]. "
            "Available: https://archive.example.org/metropolis"
        )

    def test_tv_episode(self, formatter: IeeeFormatter) -> None:
        series = Entry(entry_type=EntryType.VIDEO, title="Doctor Who")
        episode = Entry(
            entry_type=EntryType.VIDEO,
            title="Blink",
            volume=3,
            issue=10,
            date="2007-06-09",
            affiliated=[
                PersonsWithRoles(
                    role=PersonRole.DIRECTOR,
                    names=[Person(name="MacDonald", given_name="Hettie")],
                ),
                PersonsWithRoles(
                    role=PersonRole.WRITER,
                    names=[Person(name="Moffat", given_name="Steven")],
                ),
            ],
            parents=[series],
        )

        assert formatter.format(episode).value == (
            "H. MacDonald (Director), and S. Moffat (Writer). Blink, (2007)."
        )

    def test_web_page(self, formatter: IeeeFormatter) -> None:
        page = Entry(
            entry_type=EntryType.WEB,
            title="Rust book",
            publisher="Rust Foundation",
            url=QualifiedUrl(
                value="https://doc.rust-lang.org/book",
                visit_date=Date(year=2023, month=0, day=14),
            ),
        )

        assert formatter.format(page).value == (
            "“Rust book” Rust Foundation. https://doc.rust-lang.org/book "
            "(accessed: Jan. 15, 2023)."
        )

    def test_post_on_blog(self, formatter: IeeeFormatter) -> None:
        blog = Entry(entry_type=EntryType.BLOG, title="Tech Blog")
        post = Entry(entry_type=EntryType.MISC, title="Post", parents=[blog])

        assert formatter.format(post).value == "“Post” Tech Blog."

    def test_empty_record(self, formatter: IeeeFormatter) -> None:
        assert formatter.format(Entry(entry_type=EntryType.MISC)).is_empty()


class TestWalkSections:
    """Tests for the untitled chapter and section walk."""

    def test_titled_entry_untouched(self, article: Entry) -> None:
        assert walk_sections(article) == (article, None, None)

    def test_chapter_and_section_numbers(self, book: Entry) -> None:
        chapter = Entry(entry_type=EntryType.CHAPTER, serial_number="4", parents=[book])
        scene = Entry(entry_type=EntryType.SCENE, serial_number="2", parents=[chapter])

        entry, chapter_no, section_no = walk_sections(scene)

        assert entry is book
        assert (chapter_no, section_no) == (2, 4)

    def test_non_numeric_serial_dropped(self, book: Entry) -> None:
        chapter = Entry(entry_type=EntryType.CHAPTER, serial_number="IV", parents=[book])

        assert walk_sections(chapter) == (book, None, None)


class TestFormatAll:
    """Tests for list formatting."""

    def test_passes_predecessor(self, formatter: IeeeFormatter, article: Entry, book: Entry) -> None:
        with patch.object(formatter, "format", wraps=formatter.format) as spy:
            results = formatter.format_all([article, book])

        assert len(results) == 2
        assert spy.call_args_list[0].args == (article, None)
        assert spy.call_args_list[1].args == (book, article)


class TestFormatReference:
    """Tests for the shared formatter."""

    def test_uses_shared_formatter(self, article: Entry) -> None:
        get_formatter.cache_clear()

        result = format_reference(article)

        assert result.value.startswith("A. Author, “Foo,”")
        assert get_formatter() is get_formatter()
        get_formatter.cache_clear()
