# src/digest_kit/storage/document_store.py

import itertools
import logging
from collections.abc import Callable
from time import monotonic

from .models import StoredDocument

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory document registry with a fixed retention window.

    Entries expire `retention_seconds` after they were put, whether or not
    they are read. Expired entries are swept on every access, so `get`
    never returns one. Single event loop only; not thread-safe.
    """

    def __init__(
        self,
        retention_seconds: float = 3600.0,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self._retention = retention_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, StoredDocument]] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> str:
        return str(next(self._ids))

    def put(self, doc_id: str, stored: StoredDocument) -> None:
        self.sweep()
        expires_at = self._clock() + self._retention
        self._entries[doc_id] = (expires_at, stored)
        logger.debug("Stored document %s (expires in %.0fs)", doc_id, self._retention)

    def get(self, doc_id: str) -> StoredDocument | None:
        self.sweep()
        entry = self._entries.get(doc_id)
        return entry[1] if entry else None

    def evict(self, doc_id: str) -> None:
        if self._entries.pop(doc_id, None) is not None:
            logger.debug("Evicted document %s", doc_id)

    def sweep(self) -> int:
        """Remove expired entries. Returns how many were removed."""
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.info("Expired %d documents: %s", len(expired), expired)
        return len(expired)

    def __len__(self) -> int:
        self.sweep()
        return len(self._entries)
