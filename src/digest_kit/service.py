# src/digest_kit/service.py

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from digest_kit.errors import DocumentNotFoundError, SectionIndexError
from digest_kit.observability.base import MetricsHook, NoOpMetricsHook
from digest_kit.parsers import DocumentSource, TextExtractor
from digest_kit.segmentation import (
    Section,
    SectionDetector,
    SegmentationConfig,
    filter_front_matter,
    segment,
)
from digest_kit.storage import Document, DocumentStore, StoredDocument
from digest_kit.summarization import ProgressEvent, SummarizationOrchestrator
from digest_kit.text import normalize_diacritics

if TYPE_CHECKING:
    from digest_kit.config import DigestConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    upload_id: str
    sections: list[Section]
    page_count: int


class StudyNotesService:
    """Upload-then-summarize workflow over an expiring document store.

    `extract` runs once per document, locally and without model calls.
    `stream_summary` may be called per section, concurrently for different
    sections; runs share nothing but the read-only store.
    """

    def __init__(
        self,
        store: DocumentStore,
        extractor: TextExtractor,
        orchestrator: SummarizationOrchestrator,
        segmentation: SegmentationConfig = SegmentationConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._store = store
        self._extractor = extractor
        self._orchestrator = orchestrator
        self._segmentation = segmentation
        self._detector = SectionDetector(segmentation, metrics_hook=metrics_hook)

    def extract(self, source: DocumentSource) -> ExtractionResult:
        """Extract, clean, segment and store a document.

        Raises:
            ExtractionError: If the document has no usable text.
            NoSectionsFoundError: If no sections remain after filtering.
        """
        extracted = self._extractor.extract(source)
        document = Document.from_raw(extracted.text, extracted.page_count)
        logger.info(
            "Document: %d pages, %d chars (cleaned)",
            document.page_count,
            len(document.cleaned_text),
        )

        markers = filter_front_matter(
            self._detector.detect(document.cleaned_text),
            self._segmentation.excluded_names,
        )
        markers.sort(key=lambda m: m.start_offset)
        sections = segment(markers, document.cleaned_text)

        upload_id = self._store.next_id()
        self._store.put(upload_id, StoredDocument(document=document, markers=tuple(markers)))
        logger.info(
            "Upload %s: found %d sections - %s",
            upload_id,
            len(sections),
            ", ".join(s.name for s in sections),
        )
        return ExtractionResult(
            upload_id=upload_id, sections=sections, page_count=document.page_count
        )

    def sections(self, upload_id: str) -> list[Section]:
        stored = self._lookup(upload_id)
        return segment(stored.markers, stored.document.cleaned_text)

    def section_text(self, upload_id: str, index: int) -> tuple[str, str]:
        """Name and model-ready text of one section.

        Raises:
            DocumentNotFoundError: Unknown or expired upload.
            SectionIndexError: Index out of range.
        """
        stored = self._lookup(upload_id)
        sections = segment(stored.markers, stored.document.cleaned_text)
        if not 0 <= index < len(sections):
            raise SectionIndexError(index, len(sections))
        section = sections[index]
        return section.name, normalize_diacritics(section.text_of(stored.document.cleaned_text))

    def stream_summary(self, upload_id: str, index: int) -> AsyncIterator[ProgressEvent]:
        """Event stream for one section's summary.

        Lookup errors are raised here, before any event is produced.
        """
        name, text = self.section_text(upload_id, index)
        return self._orchestrator.stream(name, text)

    def _lookup(self, upload_id: str) -> StoredDocument:
        stored = self._store.get(upload_id)
        if stored is None:
            logger.warning("Upload %s not found or expired", upload_id)
            raise DocumentNotFoundError(upload_id)
        return stored


def create_service(
    config: "DigestConfig",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> StudyNotesService:
    """Wire a StudyNotesService from config with the default collaborators."""
    from digest_kit.llms import create_llm_client
    from digest_kit.parsers import PdfTextExtractor

    client = create_llm_client(config.llm, metrics_hook=metrics_hook)
    orchestrator = SummarizationOrchestrator(
        client, config.summarization, metrics_hook=metrics_hook
    )
    return StudyNotesService(
        store=DocumentStore(retention_seconds=config.retention_seconds),
        extractor=PdfTextExtractor(),
        orchestrator=orchestrator,
        segmentation=config.segmentation,
        metrics_hook=metrics_hook,
    )
