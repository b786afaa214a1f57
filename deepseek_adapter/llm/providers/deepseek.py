# deepseek_adapter/llm/providers/deepseek.py
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, Field, ValidationError, model_validator

from ..base import CompletionModel
from ..completion import (
    CompletionRequest,
    CompletionResponse,
    MessageChoice,
    ToolCallChoice,
)
from ..errors import ProviderError, ResponseError
from ..json_utils import merge

if TYPE_CHECKING:
    from ..client import DeepSeekClient

logger = logging.getLogger(__name__)

JSON = dict[str, Any]

DEEPSEEK_API_BASE_URL = "https://api.deepseek.com"
DEEPSEEK_CHAT = "deepseek-chat"
DEEPSEEK_CODER = "deepseek-coder"

# Sent when the request leaves max_tokens unset
DEFAULT_MAX_TOKENS = 2048

COMPLETIONS_PATH = "/chat/completions"


# ---------- wire models ----------

class ToolUse(BaseModel):
    id: str = ""
    name: str
    arguments: Any = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_function(cls, data: Any) -> Any:
        # OpenAI-style calls nest name/arguments under "function"
        if isinstance(data, dict) and isinstance(data.get("function"), dict):
            fn = data["function"]
            return {
                "id": data.get("id", ""),
                "name": fn.get("name"),
                "arguments": _decode_arguments(fn.get("arguments")),
            }
        return data


def _decode_arguments(value: Any) -> Any:
    # Nested calls carry arguments as a JSON-encoded string
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


class ChoiceMessage(BaseModel):
    content: str | None = None
    tool_calls: list[ToolUse] | None = None


class Choice(BaseModel):
    message: ChoiceMessage
    finish_reason: str | None = None
    index: int = 0


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class DeepSeekCompletionResponse(BaseModel):
    id: str = ""
    model: str = ""
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None


class ApiErrorResponse(BaseModel):
    message: str


ApiResponse = DeepSeekCompletionResponse | ApiErrorResponse


# ---------- request building ----------

def build_request_body(request: CompletionRequest, model_name: str) -> JSON:
    """Turn a generic completion request into a DeepSeek chat payload."""
    messages: list[JSON] = []
    if request.preamble:
        messages.append({"role": "system", "content": request.preamble})
    messages.extend(
        {"role": m.role, "content": m.content} for m in request.chat_history
    )
    messages.append({"role": "user", "content": request.prompt_with_context()})

    body: JSON = {
        "model": model_name,
        "messages": messages,
        "max_tokens": (
            request.max_tokens
            if request.max_tokens is not None
            else DEFAULT_MAX_TOKENS
        ),
    }
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.tools:
        body["tools"] = [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in request.tools
        ]

    # Overrides go last so they always win
    if request.additional_params:
        body = merge(body, request.additional_params)
    return body


# ---------- response resolution ----------

def parse_api_response(data: Any) -> ApiResponse:
    """
    Decode the response envelope.

    The envelope is untagged: an object carrying an ``error`` member, or a bare
    ``message`` without ``choices``, is a vendor error; anything else has to
    validate as a completion response.
    """
    try:
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict):
                return ApiErrorResponse.model_validate(error)
            if isinstance(error, str):
                return ApiErrorResponse(message=error)
            if "message" in data and "choices" not in data:
                return ApiErrorResponse.model_validate(data)
        return DeepSeekCompletionResponse.model_validate(data)
    except ValidationError as e:
        raise ResponseError(str(e)) from e


def resolve_response(
    api_response: ApiResponse,
) -> CompletionResponse[DeepSeekCompletionResponse]:
    """
    Pick the model's answer out of the first choice.

    A tool call always wins over text; only the first tool call is kept.
    """
    if isinstance(api_response, ApiErrorResponse):
        raise ProviderError(api_response.message)

    if not api_response.choices:
        raise ResponseError("No choices found")

    message = api_response.choices[0].message
    if message.tool_calls:
        call = message.tool_calls[0]
        return CompletionResponse[DeepSeekCompletionResponse](
            choice=ToolCallChoice(name=call.name, arguments=call.arguments),
            raw_response=api_response,
        )
    if message.content is not None:
        return CompletionResponse[DeepSeekCompletionResponse](
            choice=MessageChoice(text=message.content),
            raw_response=api_response,
        )
    raise ResponseError("No content or tool call in response")


# ---------- adapter ----------

class DeepSeekCompletionModel(CompletionModel):
    """
    DeepSeek chat model bound to a shared client.

    The model name is forwarded verbatim; use DEEPSEEK_CHAT or DEEPSEEK_CODER
    for the public models.
    """

    def __init__(self, client: DeepSeekClient, model: str) -> None:
        self.client = client
        self.model = model

    def build_request(self, request: CompletionRequest) -> JSON:
        return build_request_body(request, self.model)

    def parse_response(
        self, data: Any
    ) -> CompletionResponse[DeepSeekCompletionResponse]:
        return resolve_response(parse_api_response(data))

    async def completion(
        self, request: CompletionRequest
    ) -> CompletionResponse[DeepSeekCompletionResponse]:
        payload = self.build_request(request)
        logger.debug(
            f"POST {self.client.base_url}{COMPLETIONS_PATH} (model={self.model})"
        )

        try:
            r = await self.client.http.post(COMPLETIONS_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"DeepSeek request failed: {e}")
            raise ProviderError(str(e)) from e

        if not r.is_success:
            body = _response_text(r)
            logger.warning(f"DeepSeek returned HTTP {r.status_code}: {body}")
            raise ProviderError(body)

        try:
            data = r.json()
        except ValueError as e:
            logger.warning(f"DeepSeek returned a non-JSON body: {e}")
            raise ResponseError(str(e)) from e

        try:
            return self.parse_response(data)
        except (ProviderError, ResponseError) as e:
            logger.warning(f"DeepSeek response rejected: {e.message}")
            raise


def _response_text(r: httpx.Response) -> str:
    try:
        return r.text
    except (httpx.ResponseNotRead, UnicodeDecodeError):
        return ""
