from unittest.mock import MagicMock

from digest_kit.observability import names
from digest_kit.segmentation import (
    HeadingRecognizer,
    SectionDetector,
    SectionMarker,
    SegmentationConfig,
)


def _doc(*blocks: str) -> str:
    """Join blocks with blank lines, the way headings sit in extracted text."""
    return "\n\n".join(blocks)


class TestCandidates:
    def test_detects_headings_with_offsets(self) -> None:
        text = _doc("Introduction", "Some opening text.", "Chapter 1", "Body text.")

        markers = SectionDetector().detect(text)

        assert markers == [
            SectionMarker(name="Introduction", start_offset=0),
            SectionMarker(name="Chapter 1", start_offset=text.index("Chapter 1")),
        ]

    def test_first_line_is_a_candidate(self) -> None:
        assert SectionDetector().detect("Glossary\nterm: meaning")[0].start_offset == 0

    def test_heading_must_follow_blank_line(self) -> None:
        text = "Some paragraph text\nIntroduction\nmore text"

        assert SectionDetector().detect(text) == []

    def test_whitespace_only_line_counts_as_blank(self) -> None:
        text = "Opening words\n   \nEpilogue\nclosing"

        assert [m.name for m in SectionDetector().detect(text)] == ["Epilogue"]

    def test_line_longer_than_limit_ignored(self) -> None:
        heading = "Chapter 1 " + "x" * 60
        assert SectionDetector().detect(_doc("text", heading)) == []

    def test_sixty_char_heading_accepted(self) -> None:
        heading = "Chapter 1 " + "x" * 50
        assert len(heading) == 60
        assert [m.name for m in SectionDetector().detect(_doc("text", heading))] == [heading]

    def test_offset_points_at_raw_line_start(self) -> None:
        text = "intro text\n\n   Glossary  \nterms"

        markers = SectionDetector().detect(text)

        assert markers[0].start_offset == text.index("   Glossary")
        assert markers[0].name == "Glossary"


class TestNaming:
    def test_canonical_name_is_case_insensitive(self) -> None:
        assert SectionDetector().detect("INTRODUCTION\nx")[0].name == "Introduction"

    def test_chapter_heading_kept_verbatim(self) -> None:
        markers = SectionDetector().detect(_doc("x", "CHAPTER 3 The Yoga of Action"))
        assert markers[0].name == "CHAPTER 3 The Yoga of Action"

    def test_appendix_heading_kept_verbatim(self) -> None:
        assert SectionDetector().detect(_doc("x", "Appendix B"))[0].name == "Appendix B"

    def test_transliterated_headings(self) -> None:
        text = _doc("Gétä Dhyänam", "verses", "Context of the Gita", "story")

        names_found = [m.name for m in SectionDetector().detect(text)]

        assert names_found == ["Gita Dhyanam", "Context of the Gita"]

    def test_publishers_note_variants(self) -> None:
        for heading in ("Publisher's Note", "Publishers Note", "publisher note"):
            assert SectionDetector().detect(heading)[0].name == "Publisher's Note"

    def test_unknown_vocabulary_yields_nothing(self) -> None:
        text = _doc("Part One", "The Beginning", "Conclusion")
        assert SectionDetector().detect(text) == []

    def test_empty_text(self) -> None:
        assert SectionDetector().detect("") == []

    def test_custom_recognizers(self) -> None:
        detector = SectionDetector(recognizers=(HeadingRecognizer(r"part\s+\w+"),))

        markers = detector.detect(_doc("Part One", "text", "Introduction", "text"))

        assert [m.name for m in markers] == ["Part One"]


class TestDeduplication:
    def test_repeat_within_window_is_dropped(self) -> None:
        text = _doc("Chapter 1", "a" * 200, "Chapter 1", "rest")

        markers = SectionDetector().detect(text)

        assert markers == [SectionMarker(name="Chapter 1", start_offset=0)]

    def test_running_header_3000_chars_later_is_dropped(self) -> None:
        text = _doc("Chapter 1", "a" * 3000, "Chapter 1", "rest")

        assert len(SectionDetector().detect(text)) == 1

    def test_repeat_beyond_window_is_kept(self) -> None:
        text = _doc("Chapter 1", "a" * 6000, "Chapter 1", "rest")

        markers = SectionDetector().detect(text)

        assert [m.start_offset for m in markers] == [0, text.rindex("Chapter 1")]

    def test_different_names_never_deduplicated(self) -> None:
        text = _doc("Chapter 1", "a" * 10, "Chapter 2", "b")

        assert [m.name for m in SectionDetector().detect(text)] == [
            "Chapter 1",
            "Chapter 2",
        ]

    def test_window_is_configurable(self) -> None:
        detector = SectionDetector(SegmentationConfig(dedup_window=100))
        text = _doc("Index", "a" * 200, "Index", "b")

        assert len(detector.detect(text)) == 2


class TestMetrics:
    def test_records_markers_and_duplicates(self) -> None:
        hook = MagicMock()
        text = _doc("Chapter 1", "a", "Chapter 1", "b", "Glossary")

        SectionDetector(metrics_hook=hook).detect(text)

        hook.increment.assert_any_call(names.SEGMENTATION_MARKERS_FOUND, 2)
        hook.increment.assert_any_call(names.SEGMENTATION_DUPLICATES_SKIPPED, 1)
        assert hook.record_latency.call_args[0][0] == names.SEGMENTATION_DURATION
