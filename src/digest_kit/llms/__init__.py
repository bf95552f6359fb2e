"""Model-service adapters used by the summarizer.

    client = create_llm_client(LLMConfig(provider="openai", model="llama3.1-8b",
                                         base_url="https://api.cerebras.ai/v1"))
    response = await client.complete(messages=[Message(Role.USER, prompt)])
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client

__all__ = [
    "LLMClient",
    "LLMConfig",
    "LLMResponse",
    "Message",
    "Role",
    "Usage",
    "create_llm_client",
]
