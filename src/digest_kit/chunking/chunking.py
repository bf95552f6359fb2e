# src/digest_kit/chunking/chunking.py

import logging
from dataclasses import dataclass
from time import monotonic

from digest_kit.observability import names
from digest_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = "\n\n"
LINE_BREAK = "\n"
MIN_SPLIT_RATIO = 0.5


@dataclass(frozen=True)
class Chunk:
    text: str
    index: int  # 0-based
    total: int

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1


def split_text(
    text: str,
    limit: int,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Split `text` into pieces of at most `limit` chars at natural breaks.

    Prefers the last paragraph break at or before `limit`, then the last
    line break, as long as it lies in the back half of the window;
    otherwise cuts at exactly `limit`. Pieces are trimmed, but break
    positions are always found on the untrimmed remainder.

    Text that already fits is returned untouched as a single piece. The
    result always has at least one piece.
    """
    start = monotonic()
    if limit <= 0:
        raise ValueError("limit must be > 0")

    if len(text) <= limit:
        return [text]

    pieces: list[str] = []
    hard_cuts = 0
    remaining = text
    while remaining:
        if len(remaining) <= limit:
            pieces.append(remaining)
            break

        split_at = _find_split(remaining, limit)
        if split_at is None:
            split_at = limit
            hard_cuts += 1

        piece = remaining[:split_at].strip()
        if piece:
            pieces.append(piece)
        remaining = remaining[split_at:].strip()

    if not pieces:
        # whitespace-only input still yields one (empty) chunk
        pieces.append(text.strip())

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(pieces))
    if hard_cuts:
        metrics_hook.increment(names.CHUNKING_HARD_CUTS, hard_cuts)
        logger.debug("Split needed %d hard cuts", hard_cuts)
    return pieces


def chunk_section(
    text: str,
    limit: int,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    pieces = split_text(text, limit, metrics_hook=metrics_hook)
    return [Chunk(text=piece, index=i, total=len(pieces)) for i, piece in enumerate(pieces)]


def _find_split(text: str, limit: int) -> int | None:
    floor = limit * MIN_SPLIT_RATIO
    for separator in (PARAGRAPH_BREAK, LINE_BREAK):
        # separator must start at or before `limit`
        position = text.rfind(separator, 0, limit + len(separator))
        if position >= floor:
            return position
    return None
