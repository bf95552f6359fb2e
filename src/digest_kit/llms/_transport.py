# src/digest_kit/llms/_transport.py

"""Shared transport plumbing for the provider adapters.

Retry policy, error mapping to ModelServiceError, and per-call metrics.
Provider SDK objects are only ever touched here and in the adapters.
"""

import logging
from typing import Any

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from digest_kit.errors import ModelServiceError
from digest_kit.observability import names
from digest_kit.observability.base import MetricsHook

from .base import LLMResponse

logger = logging.getLogger(__name__)


def transport_retrying(
    max_attempts: int, transient: tuple[type[Exception], ...]
) -> AsyncRetrying:
    """Retry only `transient` errors (connection, rate limit, 5xx)."""
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
        retry=retry_if_exception_type(transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def status_error(provider: str, exc: Any) -> ModelServiceError:
    """Build a ModelServiceError from an SDK APIStatusError."""
    body = exc.response.text or exc.message
    return ModelServiceError(provider, exc.status_code, body)


def connection_error(provider: str, exc: Exception) -> ModelServiceError:
    return ModelServiceError(provider, None, str(exc))


def record_completion(
    hook: MetricsHook, provider: str, model: str, response: LLMResponse
) -> None:
    labels = {"provider": provider, "model": model}
    hook.record_latency(names.LLM_COMPLETION_DURATION, response.latency_ms, labels)
    hook.increment(names.LLM_REQUESTS_TOTAL, labels=labels)
    hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens, labels)
    hook.increment(names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens, labels)
    hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens, labels)
    logger.info(
        "%s completion: finish=%s, tokens=%d, latency=%.0fms",
        provider,
        response.finish_reason,
        response.usage.total_tokens,
        response.latency_ms,
    )


def record_failure(hook: MetricsHook, provider: str, model: str, exc: Exception) -> None:
    error_type = type(exc).__name__
    hook.increment(
        names.LLM_ERRORS_TOTAL,
        labels={"provider": provider, "model": model, "error": error_type},
    )
    logger.error("%s call to %s failed (%s): %s", provider, model, error_type, exc)
