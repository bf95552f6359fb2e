# src/digest_kit/summarization/orchestrator.py

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from time import monotonic

from digest_kit.chunking import Chunk, chunk_section
from digest_kit.llms.base import LLMClient, Message, Role
from digest_kit.observability import names
from digest_kit.observability.base import MetricsHook, NoOpMetricsHook
from digest_kit.prompts import (
    STUDY_NOTES_PROMPT,
    ChunkInfo,
    Prompt,
    PromptsLibrary,
    build_study_prompt,
    target_bullet_count,
)

from .config import SummarizationConfig
from .events import (
    CompleteEvent,
    ErrorEvent,
    ProgressEvent,
    ProgressStatus,
    ProgressUpdate,
    StartEvent,
)
from .pacing import FixedDelayPacing, PacingPolicy
from .parsing import parse_bullets

logger = logging.getLogger(__name__)

ProgressSink = Callable[[ProgressEvent], Awaitable[None] | None]


class SummarizationOrchestrator:
    """Summarizes one section, one model call per chunk, strictly in order.

    Each run is a single logical task that suspends only on the model call
    and on the pacing pause between chunks. Bullets are accumulated locally
    and only released with the terminal `complete` event; an upstream
    failure at any chunk discards everything gathered so far.
    """

    def __init__(
        self,
        client: LLMClient,
        config: SummarizationConfig = SummarizationConfig(),
        pacing: PacingPolicy | None = None,
        prompt: Prompt | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._client = client
        self._config = config
        self._pacing = pacing or FixedDelayPacing(config.chunk_delay_seconds)
        self._prompt = prompt or PromptsLibrary().get(*STUDY_NOTES_PROMPT)
        self.metrics_hook = metrics_hook

    async def stream(
        self, section_name: str, section_text: str
    ) -> AsyncIterator[ProgressEvent]:
        """Yield the run's events. Upstream failures end in an `error` event.

        Closing the iterator early stops the run before the next chunk; a
        model call already in flight is always awaited first.
        """
        try:
            async with aclosing(self._run(section_name, section_text)) as events:
                async for event in events:
                    yield event
        except Exception as exc:
            yield ErrorEvent(message=str(exc))

    async def summarize(
        self, section_name: str, section_text: str, sink: ProgressSink
    ) -> list[str]:
        """Run to completion, pushing every event to `sink`.

        `sink` may be a plain or an async callable.

        Raises:
            The upstream error, after the `error` event has been delivered.
            An error raised by `sink` itself stops the run and propagates
            as-is, with no further event.
        """
        bullets: list[str] = []
        async with aclosing(self._run(section_name, section_text)) as events:
            while True:
                try:
                    event = await anext(events)
                except StopAsyncIteration:
                    break
                except Exception as exc:
                    await _deliver(sink, ErrorEvent(message=str(exc)))
                    raise

                await _deliver(sink, event)
                if isinstance(event, CompleteEvent):
                    bullets = list(event.bullets)
        return bullets

    async def _run(
        self, section_name: str, section_text: str
    ) -> AsyncIterator[ProgressEvent]:
        start = monotonic()
        chunks = chunk_section(
            section_text,
            self._config.chunk_char_limit,
            metrics_hook=self.metrics_hook,
        )
        total = len(chunks)
        self.metrics_hook.increment(names.SUMMARIZATION_RUNS_TOTAL)
        self.metrics_hook.record_gauge(names.SUMMARIZATION_SECTION_CHARS, len(section_text))
        logger.info(
            'Summarizing "%s": %d chars in %d chunks',
            section_name,
            len(section_text),
            total,
        )

        yield StartEvent(total_chunks=total, section_name=section_name)

        bullets: list[str] = []
        for chunk in chunks:
            number = chunk.index + 1
            yield ProgressUpdate(
                chunk=number, total_chunks=total, status=ProgressStatus.SUMMARIZING
            )

            try:
                chunk_bullets = await self._summarize_chunk(section_name, chunk)
            except Exception:
                self.metrics_hook.increment(names.SUMMARIZATION_ERRORS_TOTAL)
                logger.error(
                    'Chunk %d/%d of "%s" failed; discarding %d bullets',
                    number,
                    total,
                    section_name,
                    len(bullets),
                )
                raise
            bullets.extend(chunk_bullets)
            self.metrics_hook.increment(names.SUMMARIZATION_CHUNKS_TOTAL)

            yield ProgressUpdate(
                chunk=number, total_chunks=total, status=ProgressStatus.DONE
            )

            if not chunk.is_last:
                yield ProgressUpdate(
                    chunk=number, total_chunks=total, status=ProgressStatus.WAITING
                )
                await self._pacing.wait(number, total)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SUMMARIZATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SUMMARIZATION_BULLETS_TOTAL, len(bullets))
        logger.info('"%s" done: %d bullets', section_name, len(bullets))

        yield CompleteEvent(bullets=bullets)

    async def _summarize_chunk(self, section_name: str, chunk: Chunk) -> list[str]:
        config = self._config
        chunk_info = (
            ChunkInfo(current=chunk.index + 1, total=chunk.total)
            if chunk.total > 1
            else None
        )
        prompt = build_study_prompt(
            self._prompt,
            section_name=section_name,
            text=chunk.text,
            chunk_info=chunk_info,
            target_bullets=target_bullet_count(
                len(chunk.text),
                chars_per_bullet=config.chars_per_bullet,
                minimum=config.min_bullets,
                maximum=config.max_bullets,
            ),
            source_title=config.source_title,
        )
        logger.info(
            "Chunk %d/%d (%d chars)", chunk.index + 1, chunk.total, len(chunk.text)
        )

        response = await self._client.complete(
            messages=[Message(role=Role.USER, content=prompt)],
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        return parse_bullets(response.content, metrics_hook=self.metrics_hook)


async def _deliver(sink: ProgressSink, event: ProgressEvent) -> None:
    result = sink(event)
    if inspect.isawaitable(result):
        await result
