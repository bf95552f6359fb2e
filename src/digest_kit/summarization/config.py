# src/digest_kit/summarization/config.py

from dataclasses import dataclass

from digest_kit.prompts.builder import DEFAULT_SOURCE_TITLE


@dataclass(frozen=True)
class SummarizationConfig:
    """Chunking, pacing and prompt sizing for one summarization run.

    Immutable. Explicit. The bullet heuristic constants are tuned, not derived.
    """

    chunk_char_limit: int = 25_000  # max chars per model call
    chunk_delay_seconds: float = 10.0  # pause between calls (upstream rate limit)
    chars_per_bullet: int = 1500
    min_bullets: int = 5
    max_bullets: int = 25
    temperature: float = 0.0
    max_tokens: int = 4096
    source_title: str = DEFAULT_SOURCE_TITLE
