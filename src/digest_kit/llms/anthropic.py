# src/digest_kit/llms/anthropic.py

import logging
from time import monotonic
from typing import Any, Literal

from anthropic import (
    APIConnectionError,
    APIStatusError,
    AsyncAnthropic,
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
from .base import LLMClient, LLMResponse, Message, Role, Usage

logger = logging.getLogger(__name__)

PROVIDER = "anthropic"

_TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)

_STOP_REASONS: dict[str, Literal["stop", "length"]] = {
    "end_turn": "stop",
    "stop_sequence": "stop",
    "max_tokens": "length",
}


class AnthropicLLMClient(LLMClient):
    """Anthropic Messages API client.

    Stateless; retries transport failures only.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        max_tokens: int = 4096,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncAnthropic(
            api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0
        )
        self._model = model
        self._max_retries = max_retries
        self._max_tokens = max_tokens
        self.metrics_hook = metrics_hook
        logger.info("Anthropic client ready: model=%s", model)

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()
        system, conversation = self._extract_system(messages)
        logger.debug("Calling %s: %d messages", self._model, len(messages))

        try:
            raw = await self._call_api(
                system=system,
                messages=[{"role": m.role.value, "content": m.content} for m in conversation],
                temperature=temperature,
                # required by the Messages API
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
        self,
        *,
        system: str | None,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int,
    ) -> Any:
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if system:
            kwargs["system"] = system

        async for attempt in transport_retrying(self._max_retries, _TRANSIENT_ERRORS):
            with attempt:
                return await self._client.messages.create(**kwargs)

    def _extract_system(self, messages: list[Message]) -> tuple[str | None, list[Message]]:
        """Split off the system prompt, which Anthropic takes as a parameter.

        Multiple system messages are joined in order.
        """
        system = [m.content for m in messages if m.role == Role.SYSTEM]
        rest = [m for m in messages if m.role != Role.SYSTEM]
        return ("\n\n".join(system) or None), rest

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        text_parts = [block.text for block in raw.content if block.type == "text"]
        return LLMResponse(
            content="".join(text_parts).strip() if text_parts else None,
            finish_reason=_STOP_REASONS.get(raw.stop_reason, "error"),
            usage=Usage(
                prompt_tokens=raw.usage.input_tokens,
                completion_tokens=raw.usage.output_tokens,
                total_tokens=raw.usage.input_tokens + raw.usage.output_tokens,
            ),
            latency_ms=latency_ms,
        )
