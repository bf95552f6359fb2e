# src/digest_kit/llms/openai.py

import logging
from time import monotonic
from typing import Any, Literal

from openai import (
    APIConnectionError,
    APIStatusError,
    AsyncOpenAI,
    InternalServerError,
    RateLimitError,
)

from digest_kit.observability.base import MetricsHook, NoOpMetricsHook

from ._transport import (
    connection_error,
    record_completion,
    record_failure,
    status_error,
    transport_retrying,
)
from .base import LLMClient, LLMResponse, Message, Usage

logger = logging.getLogger(__name__)

PROVIDER = "openai"

_TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)

_FINISH_REASONS: dict[str, Literal["stop", "length"]] = {"stop": "stop", "length": "length"}


class OpenAILLMClient(LLMClient):
    """Chat completions client for OpenAI and OpenAI-compatible endpoints.

    Point `base_url` at any compatible service (Cerebras, Groq, a local
    server). Stateless; retries transport failures only.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        base_url: str | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        max_tokens: int = 4096,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        # SDK-level retries are disabled; tenacity is the only retry layer
        self._client = AsyncOpenAI(
            api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0
        )
        self._model = model
        self._max_retries = max_retries
        self._max_tokens = max_tokens
        self.metrics_hook = metrics_hook
        logger.info(
            "OpenAI client ready: model=%s, base_url=%s", model, base_url or "default"
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()
        logger.debug(
            "Calling %s: %d messages, %d chars",
            self._model,
            len(messages),
            sum(len(m.content) for m in messages),
        )

        try:
            raw = await self._call_api(
                messages=self._convert_messages(messages),
                temperature=temperature,
                max_tokens=max_tokens or self._max_tokens,
            )
        except APIStatusError as exc:
            record_failure(self.metrics_hook, PROVIDER, self._model, exc)
            raise status_error(PROVIDER, exc) from exc
        except APIConnectionError as exc:
            record_failure(self.metrics_hook, PROVIDER, self._model, exc)
            raise connection_error(PROVIDER, exc) from exc

        response = self._normalize_response(raw, 1000 * (monotonic() - start))
        record_completion(self.metrics_hook, PROVIDER, self._model, response)
        return response

    async def _call_api(
        self, *, messages: list[dict[str, Any]], temperature: float, max_tokens: int
    ) -> Any:
        async for attempt in transport_retrying(self._max_retries, _TRANSIENT_ERRORS):
            with attempt:
                return await self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,
                    temperature=temperature,
                    max_completion_tokens=max_tokens,
                )

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        choice = raw.choices[0]
        content = choice.message.content
        return LLMResponse(
            content=content.strip() if content is not None else None,
            finish_reason=_FINISH_REASONS.get(choice.finish_reason, "error"),
            usage=Usage(
                prompt_tokens=raw.usage.prompt_tokens,
                completion_tokens=raw.usage.completion_tokens,
                total_tokens=raw.usage.total_tokens,
            ),
            latency_ms=latency_ms,
        )
