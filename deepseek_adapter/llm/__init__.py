from .base import CompletionModel
from .client import DeepSeekClient, DeepSeekSettings
from .completion import (
    CompletionRequest,
    CompletionResponse,
    Document,
    Message,
    MessageChoice,
    ToolCallChoice,
    ToolDefinition,
)
from .errors import CompletionError, ProviderError, ResponseError

__all__ = [
    "CompletionError",
    "CompletionModel",
    "CompletionRequest",
    "CompletionResponse",
    "DeepSeekClient",
    "DeepSeekSettings",
    "Document",
    "Message",
    "MessageChoice",
    "ProviderError",
    "ResponseError",
    "ToolCallChoice",
    "ToolDefinition",
]
