# src/digest_kit/prompts/builder.py

import math
from dataclasses import dataclass

from .prompt import Prompt

DEFAULT_SOURCE_TITLE = (
    "the Bhagavad Gita Home Study Course by Pujya Swami Dayananda Saraswati"
)


@dataclass(frozen=True)
class ChunkInfo:
    current: int  # 1-based
    total: int


def target_bullet_count(
    length: int, chars_per_bullet: int = 1500, minimum: int = 5, maximum: int = 25
) -> int:
    """Roughly one bullet per `chars_per_bullet` chars, clamped to [minimum, maximum]."""
    estimate = math.floor(length / chars_per_bullet + 0.5)  # round half up
    return min(maximum, max(minimum, estimate))


def chunk_note(chunk_info: ChunkInfo | None) -> str:
    if chunk_info is None:
        return ""
    return (
        f"\n(This is part {chunk_info.current} of {chunk_info.total} for this section."
        " Summarize THIS part only.)"
    )


def build_study_prompt(
    prompt: Prompt,
    *,
    section_name: str,
    text: str,
    chunk_info: ChunkInfo | None,
    target_bullets: int,
    source_title: str = DEFAULT_SOURCE_TITLE,
) -> str:
    return prompt.render(
        source_title=source_title,
        section_name=section_name,
        chunk_note=chunk_note(chunk_info),
        target_bullets=target_bullets,
        text=text,
    )
