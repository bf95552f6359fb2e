# src/digest_kit/llms/factory.py

from digest_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Build the adapter for `config.provider`.

    Provider SDKs are imported lazily, so only the one in use is loaded.

    Raises:
        ValueError: If provider is unknown.
    """
    options = {
        "api_key": config.api_key,
        "model": config.model,
        "base_url": config.base_url,
        "timeout": config.timeout,
        "max_retries": config.max_retries,
        "max_tokens": config.max_tokens,
        "metrics_hook": metrics_hook,
    }

    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(**options)

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(**options)

    raise ValueError(f"Unknown LLM provider: {config.provider}")
