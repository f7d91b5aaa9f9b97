"""Client configuration and environment-driven settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Compiled-in base URL used when a configuration leaves it empty.
DEFAULT_BASE_URL = ""


class ClientConfig(BaseModel):
    """Values consumed by :func:`library_client.new_client`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = Field(default="", description="Base URL of the service.")
    auth_token: SecretStr | None = Field(
        default=None,
        description="Token sent in the Authorization header of each request.",
    )
    user_agent: str | None = None
    http_client: httpx.AsyncClient | None = Field(
        default=None,
        description="Transport used for requests; a private one is created when omitted.",
    )
    logger: Any | None = None

    @field_validator("auth_token", mode="before")
    @classmethod
    def _coerce_token(cls, value):
        if isinstance(value, str) and not value:
            return None
        return value


DEFAULT_CONFIG = ClientConfig()


def default_config() -> ClientConfig:
    return DEFAULT_CONFIG.model_copy()


class LibrarySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    auth_token: SecretStr | None = None
    user_agent: str | None = None
    request_timeout_seconds: float = Field(default=30.0, gt=0, le=600)

    @field_validator("auth_token", "user_agent", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_config(
        self,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: Any | None = None,
    ) -> ClientConfig:
        """Build a client configuration from the environment values."""

        return ClientConfig(
            base_url=self.base_url,
            auth_token=self.auth_token,
            user_agent=self.user_agent,
            http_client=http_client,
            logger=logger,
        )


@lru_cache
def get_settings() -> LibrarySettings:
    """Return cached settings instance."""

    return LibrarySettings()


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "LibrarySettings",
    "default_config",
    "get_settings",
]
