# src/digest_kit/storage/models.py

from dataclasses import dataclass

from digest_kit.segmentation.models import SectionMarker
from digest_kit.text import clean_text


@dataclass(frozen=True)
class Document:
    """Extracted document. `cleaned_text` is derived once and never changes."""

    raw_text: str
    cleaned_text: str
    page_count: int

    @classmethod
    def from_raw(cls, raw_text: str, page_count: int) -> "Document":
        return cls(
            raw_text=raw_text,
            cleaned_text=clean_text(raw_text),
            page_count=page_count,
        )


@dataclass(frozen=True)
class StoredDocument:
    document: Document
    markers: tuple[SectionMarker, ...]  # filtered, sorted by offset
