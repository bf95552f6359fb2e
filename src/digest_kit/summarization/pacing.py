# src/digest_kit/summarization/pacing.py

import asyncio
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class PacingPolicy(Protocol):
    """Decides how long to pause between consecutive model calls.

    Called after a chunk completes and before the next one starts; never
    after the last chunk.
    """

    async def wait(self, completed_chunk: int, total_chunks: int) -> None: ...


class FixedDelayPacing:
    """Constant pause between calls to stay under the upstream request rate."""

    def __init__(self, delay_seconds: float = 10.0) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self.delay_seconds = delay_seconds

    async def wait(self, completed_chunk: int, total_chunks: int) -> None:
        logger.info(
            "Waiting %.1fs before chunk %d/%d",
            self.delay_seconds,
            completed_chunk + 1,
            total_chunks,
        )
        await asyncio.sleep(self.delay_seconds)
