from collections.abc import Callable

import pytest

from digest_kit.llms.base import LLMResponse, Message, Usage
from digest_kit.observability.base import NoOpMetricsHook


class FakeLLMClient:
    """Scripted LLMClient: returns (or raises) the queued items in order."""

    def __init__(self, responses: list[str | Exception]) -> None:
        self.metrics_hook = NoOpMetricsHook()
        self.prompts: list[str] = []
        self._responses = list(responses)

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        self.prompts.append(messages[-1].content)
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return LLMResponse(
            content=item,
            finish_reason="stop",
            usage=Usage(prompt_tokens=10, completion_tokens=5, total_tokens=15),
            latency_ms=1.0,
        )


class RecordingPacing:
    """Pacing policy that records calls instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    async def wait(self, completed_chunk: int, total_chunks: int) -> None:
        self.calls.append((completed_chunk, total_chunks))


@pytest.fixture
def fake_llm() -> Callable[[list[str | Exception]], FakeLLMClient]:
    return FakeLLMClient


@pytest.fixture
def pacing() -> RecordingPacing:
    return RecordingPacing()
