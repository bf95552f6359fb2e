from digest_kit.segmentation import SectionMarker
from digest_kit.storage import Document, DocumentStore, StoredDocument


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _stored(text: str = "Introduction\n\nbody") -> StoredDocument:
    return StoredDocument(
        document=Document.from_raw(text, page_count=1),
        markers=(SectionMarker("Introduction", 0),),
    )


class TestDocument:
    def test_from_raw_cleans_once(self) -> None:
        document = Document.from_raw("Introduction\r\n\r\n12\r\nbody   text\f", page_count=3)

        assert document.raw_text.startswith("Introduction\r\n")
        assert document.cleaned_text == "Introduction\n\nbody text"
        assert document.page_count == 3


class TestDocumentStore:
    def test_ids_are_sequential_strings(self) -> None:
        store = DocumentStore()

        assert [store.next_id() for _ in range(3)] == ["1", "2", "3"]

    def test_put_and_get(self) -> None:
        store = DocumentStore()
        stored = _stored()

        store.put("1", stored)

        assert store.get("1") is stored
        assert store.get("2") is None
        assert len(store) == 1

    def test_entry_expires_after_retention(self) -> None:
        clock = FakeClock()
        store = DocumentStore(retention_seconds=3600, clock=clock)
        store.put("1", _stored())

        clock.now = 3599.0
        assert store.get("1") is not None

        clock.now = 3600.0
        assert store.get("1") is None
        assert len(store) == 0

    def test_reads_do_not_extend_retention(self) -> None:
        clock = FakeClock()
        store = DocumentStore(retention_seconds=10, clock=clock)
        store.put("1", _stored())

        for t in (3.0, 6.0, 9.0):
            clock.now = t
            assert store.get("1") is not None

        clock.now = 10.5
        assert store.get("1") is None

    def test_sweep_counts_removed(self) -> None:
        clock = FakeClock()
        store = DocumentStore(retention_seconds=10, clock=clock)
        store.put("1", _stored())
        clock.now = 5.0
        store.put("2", _stored())

        clock.now = 12.0
        assert store.sweep() == 1
        assert store.get("2") is not None

    def test_evict(self) -> None:
        store = DocumentStore()
        store.put("1", _stored())

        store.evict("1")
        store.evict("missing")

        assert store.get("1") is None
