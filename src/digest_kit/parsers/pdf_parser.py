# src/digest_kit/parsers/pdf_parser.py

import io
import logging
from typing import Any, cast

import pdfplumber

from digest_kit.errors import ExtractionError

from .base import DocumentSource, TextExtractor
from .models import ExtractedText

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class PdfTextExtractor(TextExtractor):
    """
    Plain-text PDF extraction.
    - Uses page order
    - Pages are separated by a blank line
    - Rejects near-empty output (scanned/image PDFs)
    """

    def __init__(self, min_chars: int = 100, layout: bool = False) -> None:
        self._min_chars = min_chars
        self._layout = layout

    def extract(self, source: DocumentSource) -> ExtractedText:
        if isinstance(source, bytes):
            source = io.BytesIO(source)

        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                pages = [page.extract_text(layout=self._layout) or "" for page in pdf.pages]
        except Exception as exc:
            logger.error("PDF could not be opened: %s", exc)
            raise ExtractionError(f"Could not read PDF: {exc}") from exc

        text = PAGE_SEPARATOR.join(pages)
        if len(text.strip()) < self._min_chars:
            logger.warning(
                "Only %d chars extracted from %d pages", len(text.strip()), len(pages)
            )
            raise ExtractionError(
                "Could not extract text. It may be a scanned/image PDF."
            )

        logger.info("PDF: %d pages, %d chars extracted", len(pages), len(text))
        return ExtractedText(text=text, page_count=len(pages))
