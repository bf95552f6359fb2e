from .base import DocumentSource, TextExtractor
from .models import ExtractedText
from .pdf_parser import PdfTextExtractor

__all__ = [
    "DocumentSource",
    "ExtractedText",
    "PdfTextExtractor",
    "TextExtractor",
]
