# src/digest_kit/segmentation/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionMarker:
    """A detected section boundary.

    `name` is either a canonical label or the heading text itself.
    """

    name: str
    start_offset: int


@dataclass(frozen=True)
class Section:
    """Read-only view over one span of the cleaned document text.

    Always recomputable from (markers, cleaned_text); never stored.
    """

    name: str
    start_offset: int
    end_offset: int
    char_count: int
    word_count: int

    def text_of(self, full_text: str) -> str:
        return full_text[self.start_offset : self.end_offset].strip()
