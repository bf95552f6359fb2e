from .document_store import DocumentStore
from .models import Document, StoredDocument

__all__ = [
    "Document",
    "DocumentStore",
    "StoredDocument",
]
