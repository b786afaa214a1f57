"""
Generic completion types shared by every provider adapter.

A ``CompletionRequest`` describes one chat turn to send to a model; a
``CompletionResponse`` carries the resolved choice (plain text or a tool
call) together with the provider's raw payload for diagnostics.
"""

from __future__ import annotations

import json
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

JSON = dict[str, Any]

RawT = TypeVar("RawT")


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ToolDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    parameters: JSON = Field(default_factory=dict)


class Document(BaseModel):
    """A piece of context attached to the prompt."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    additional_props: dict[str, str] = Field(default_factory=dict)

    def render(self) -> str:
        body = self.text
        if self.additional_props:
            metadata = " ".join(
                f"{key}: {json.dumps(value)}"
                for key, value in sorted(self.additional_props.items())
            )
            body = f"<metadata {metadata} />\n{self.text}"
        return f"<file id: {self.id}>\n{body}\n</file>\n"


class CompletionRequest(BaseModel):
    """Everything a provider needs for a single completion call."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    preamble: str | None = None
    chat_history: list[Message] = Field(default_factory=list)
    documents: list[Document] = Field(default_factory=list)
    tools: list[ToolDefinition] = Field(default_factory=list)
    temperature: float | None = None
    max_tokens: int | None = None
    additional_params: JSON | None = None

    @classmethod
    def from_prompt(cls, prompt: str, **kwargs: Any) -> CompletionRequest:
        return cls(prompt=prompt, **kwargs)

    def prompt_with_context(self) -> str:
        """Return the prompt with attached documents rendered in front of it."""
        if not self.documents:
            return self.prompt
        attachments = "".join(doc.render() for doc in self.documents)
        return f"<attachments>\n{attachments}</attachments>\n\n{self.prompt}"


# ---------- resolved choices ----------

class MessageChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["message"] = "message"
    text: str


class ToolCallChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["tool_call"] = "tool_call"
    name: str
    arguments: Any = None


ModelChoice = MessageChoice | ToolCallChoice


class CompletionResponse(BaseModel, Generic[RawT]):
    """Resolved model output plus the raw provider response."""

    choice: ModelChoice = Field(discriminator="kind")
    raw_response: RawT
