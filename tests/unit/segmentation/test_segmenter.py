import pytest

from digest_kit.errors import NoSectionsFoundError
from digest_kit.segmentation import Section, SectionMarker, filter_front_matter, segment


class TestSegment:
    def test_two_markers_split_text(self) -> None:
        markers = [SectionMarker("A", 0), SectionMarker("B", 50)]

        sections = segment(markers, "x" * 100)

        assert [(s.name, s.start_offset, s.end_offset) for s in sections] == [
            ("A", 0, 50),
            ("B", 50, 100),
        ]

    def test_counts_computed_on_trimmed_text(self) -> None:
        text = "A\n\none two three\n\nB\n\nfour five"
        markers = [SectionMarker("A", 0), SectionMarker("B", text.index("B"))]

        first, second = segment(markers, text)

        assert first.char_count == len("A\n\none two three")
        assert first.word_count == 4
        assert second.word_count == 3

    def test_spans_cover_whole_text(self) -> None:
        text = "front matter\n\n" + "Intro\n\n" + "y" * 40 + "\n\nChapter 1\n\n" + "z" * 40
        markers = [
            SectionMarker("Chapter 1", text.index("Chapter 1")),
            SectionMarker("Introduction", text.index("Intro")),
        ]

        sections = segment(markers, text)

        assert sections[0].start_offset == 0
        assert sections[-1].end_offset == len(text)
        for previous, current in zip(sections, sections[1:]):
            assert previous.end_offset == current.start_offset

    def test_markers_sorted_by_offset(self) -> None:
        markers = [SectionMarker("B", 50), SectionMarker("A", 0)]

        assert [s.name for s in segment(markers, "x" * 100)] == ["A", "B"]

    def test_whitespace_only_section_still_emitted(self) -> None:
        markers = [SectionMarker("A", 0), SectionMarker("B", 5)]

        sections = segment(markers, "     rest of it")

        assert sections[0].char_count == 0
        assert sections[0].word_count == 0

    def test_no_markers_raises(self) -> None:
        with pytest.raises(NoSectionsFoundError, match="Could not identify sections"):
            segment([], "some text")

    def test_text_of_returns_trimmed_span(self) -> None:
        section = Section("A", 0, 8, 6, 1)

        assert section.text_of("  abc   def") == "abc"


class TestFilterFrontMatter:
    def test_removes_preface(self) -> None:
        markers = [
            SectionMarker("Publisher's Note", 0),
            SectionMarker("Preface", 100),
            SectionMarker("Introduction", 200),
        ]

        kept = filter_front_matter(markers)

        assert [m.name for m in kept] == ["Publisher's Note", "Introduction"]

    def test_match_is_whole_name_and_case_insensitive(self) -> None:
        markers = [SectionMarker("PREFACE", 0), SectionMarker("Preface to Chapter 2", 10)]

        assert [m.name for m in filter_front_matter(markers)] == ["Preface to Chapter 2"]

    def test_custom_exclusions(self) -> None:
        markers = [SectionMarker("Index", 0), SectionMarker("Glossary", 10)]

        kept = filter_front_matter(markers, excluded_names=("index", "glossary"))

        assert kept == []

    def test_only_preface_leaves_nothing_to_segment(self) -> None:
        kept = filter_front_matter([SectionMarker("Preface", 0)])

        with pytest.raises(NoSectionsFoundError):
            segment(kept, "Preface\n\ntext")
