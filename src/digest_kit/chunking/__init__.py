from .chunking import Chunk, chunk_section, split_text

__all__ = [
    "Chunk",
    "chunk_section",
    "split_text",
]
