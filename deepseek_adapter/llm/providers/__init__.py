from .deepseek import (
    DEEPSEEK_API_BASE_URL,
    DEEPSEEK_CHAT,
    DEEPSEEK_CODER,
    ApiErrorResponse,
    DeepSeekCompletionModel,
    DeepSeekCompletionResponse,
    build_request_body,
    parse_api_response,
    resolve_response,
)

__all__ = [
    "DEEPSEEK_API_BASE_URL",
    "DEEPSEEK_CHAT",
    "DEEPSEEK_CODER",
    "ApiErrorResponse",
    "DeepSeekCompletionModel",
    "DeepSeekCompletionResponse",
    "build_request_body",
    "parse_api_response",
    "resolve_response",
]
