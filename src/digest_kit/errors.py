# src/digest_kit/errors.py

"""Error taxonomy for digest-kit.

Four families, each surfaced differently by callers:

- Input: the uploaded document is missing or has no extractable text.
- Detection: no section headings survived detection and filtering.
- Lookup: an unknown/expired document id or an out-of-range section index.
- Upstream: the model service failed; aborts only the current summarization.
"""


class DigestError(Exception):
    """Base class for all digest-kit errors."""


class ExtractionError(DigestError):
    """The source document could not be turned into usable text."""


class NoSectionsFoundError(DigestError):
    """Section detection produced no markers after filtering."""

    def __init__(self, message: str = "Could not identify sections in this document.") -> None:
        super().__init__(message)


class LookupFailure(DigestError):
    """A requested document or section does not exist."""


class DocumentNotFoundError(LookupFailure):
    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document '{doc_id}' not found or expired. Please re-upload.")


class SectionIndexError(LookupFailure):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Invalid section index {index} (document has {count} sections).")


class ModelServiceError(DigestError):
    """The model service returned a non-success response or could not be reached."""

    def __init__(self, provider: str, status: int | None, body: str) -> None:
        self.provider = provider
        self.status = status
        self.body = body
        status_text = status if status is not None else "unreachable"
        super().__init__(f"{provider} API error {status_text}: {body}")
