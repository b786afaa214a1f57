from __future__ import annotations

import logging
import os
from typing import Any

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..http_client import HttpConfig, create_http_client
from .providers.deepseek import DEEPSEEK_API_BASE_URL, DeepSeekCompletionModel

logger = logging.getLogger(__name__)

API_KEY_ENV = "DEEPSEEK_API_KEY"
BASE_URL_ENV = "DEEPSEEK_BASE_URL"
BETA_HEADER = "x-deepseek-beta"


class DeepSeekSettings(BaseModel):
    """Immutable connection settings, shared by every model of a client."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEEPSEEK_API_BASE_URL
    betas: tuple[str, ...] = ()
    http: HttpConfig = Field(default_factory=HttpConfig)

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DeepSeek API key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got '{value}'")
        return value.rstrip("/")

    @field_validator("betas")
    @classmethod
    def _strip_betas(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(b.strip() for b in value if b.strip())

    @classmethod
    def from_dict(
        cls, cfg: dict[str, Any], api_key: str, http: HttpConfig | None = None
    ) -> DeepSeekSettings:
        """Build settings from a provider block of the YAML config."""
        return cls(
            api_key=api_key,
            base_url=cfg.get("base_url") or DEEPSEEK_API_BASE_URL,
            betas=_as_betas(cfg.get("betas")),
            http=http or HttpConfig(),
        )

    def headers(self) -> dict[str, str]:
        hdrs = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self.betas:
            hdrs[BETA_HEADER] = ",".join(self.betas)
        return hdrs


class DeepSeekClient:
    """
    Owns the HTTP connection pool and hands out completion models.

    Pass ``transport`` to substitute the network layer in tests; the client
    always builds its own ``httpx.AsyncClient`` so the auth headers are never lost.
    """

    def __init__(
        self,
        settings: DeepSeekSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.http = create_http_client(
            settings.base_url,
            headers=settings.headers(),
            config=settings.http,
            transport=transport,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> DeepSeekClient:
        """Create a client from DEEPSEEK_API_KEY (and optional DEEPSEEK_BASE_URL)."""
        load_dotenv()
        api_key = os.getenv(API_KEY_ENV)
        if not api_key:
            raise ValueError(
                f"API key '{API_KEY_ENV}' not found in environment variables"
            )
        settings = DeepSeekSettings(
            api_key=api_key,
            base_url=os.getenv(BASE_URL_ENV) or DEEPSEEK_API_BASE_URL,
        )
        return cls(settings, **kwargs)

    async def __aenter__(self) -> DeepSeekClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    # ---------- public ----------
    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def completion_model(self, model: str) -> DeepSeekCompletionModel:
        return DeepSeekCompletionModel(self, model)

    async def close(self) -> None:
        await self.http.aclose()


def _as_betas(value: Any) -> tuple[str, ...]:
    # YAML allows a single flag as a bare scalar
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)
