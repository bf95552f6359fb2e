# src/digest_kit/llms/config.py

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class LLMConfig:
    provider: Literal["openai", "anthropic"]
    model: str
    api_key: str | None = None  # None: the SDK reads its own env var
    base_url: str | None = None  # OpenAI-compatible endpoints (e.g. Cerebras)
    timeout: float = 60.0
    max_retries: int = 3  # attempts, transport errors only
    max_tokens: int = 4096  # used when a call does not pass its own
