"""DeepSeek chat-completion adapter."""

from .llm import (
    CompletionError,
    CompletionRequest,
    CompletionResponse,
    DeepSeekClient,
    DeepSeekSettings,
    Message,
    MessageChoice,
    ProviderError,
    ResponseError,
    ToolCallChoice,
    ToolDefinition,
)
from .llm.providers import DEEPSEEK_CHAT, DEEPSEEK_CODER

__all__ = [
    "DEEPSEEK_CHAT",
    "DEEPSEEK_CODER",
    "CompletionError",
    "CompletionRequest",
    "CompletionResponse",
    "DeepSeekClient",
    "DeepSeekSettings",
    "Message",
    "MessageChoice",
    "ProviderError",
    "ResponseError",
    "ToolCallChoice",
    "ToolDefinition",
]
