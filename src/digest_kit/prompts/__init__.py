from .builder import (
    DEFAULT_SOURCE_TITLE,
    ChunkInfo,
    build_study_prompt,
    chunk_note,
    target_bullet_count,
)
from .prompt import Prompt
from .prompts_library import TEMPLATES_DIR, PromptsLibrary

STUDY_NOTES_PROMPT = ("study_notes", "1")

__all__ = [
    "DEFAULT_SOURCE_TITLE",
    "STUDY_NOTES_PROMPT",
    "TEMPLATES_DIR",
    "ChunkInfo",
    "Prompt",
    "PromptsLibrary",
    "build_study_prompt",
    "chunk_note",
    "target_bullet_count",
]
