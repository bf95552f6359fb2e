# src/digest_kit/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from digest_kit.observability.base import MetricsHook


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Provider-neutral completion result.

    `content` is stripped of surrounding whitespace, or None when the model
    returned no text.
    """

    content: str | None
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """A model service that turns a message list into one completion.

    Adapters hold no conversation state and never inspect model output.
    Transport failures may be retried inside the adapter; everything else
    surfaces as ModelServiceError on the first occurrence.
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """
        Raises:
            ModelServiceError: On a non-success response, or once transport
                retries are exhausted.
        """
        ...
