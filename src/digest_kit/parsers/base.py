# src/digest_kit/parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import ExtractedText

DocumentSource = bytes | str | Path | BinaryIO


class TextExtractor(ABC):
    @abstractmethod
    def extract(self, source: DocumentSource) -> ExtractedText:
        """
        Decode a binary document into plain text plus its page count.

        Requirements:
        - Deterministic output for same input
        - Page texts in page order
        - Raises ExtractionError when no usable text comes out
        """
        raise NotImplementedError
