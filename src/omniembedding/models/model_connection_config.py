# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared OpenAI connection configuration.

Holds the connection values every OpenAI-backed feature falls back to when
its own configuration leaves a field unset.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniembedding.constants import DEFAULT_BASE_URL, ENV_PREFIX_CONNECTION


class ModelOpenAiConnectionConfig(BaseSettings):
    """Pydantic Settings for the shared OpenAI connection.

    Environment variables:
        OMNIEMBEDDING_OPENAI_BASE_URL: str (default https://api.openai.com)
        OMNIEMBEDDING_OPENAI_API_KEY: str
        OMNIEMBEDDING_OPENAI_PROJECT_ID: str
        OMNIEMBEDDING_OPENAI_ORGANIZATION_ID: str
        OMNIEMBEDDING_OPENAI_HEADERS: JSON object of header name to value

    Attributes:
        base_url: Base URL of the OpenAI-compatible API.
        api_key: API key sent as a bearer token.
        project_id: Optional project identifier (OpenAI-Project header).
        organization_id: Optional organization identifier
            (OpenAI-Organization header).
        headers: Extra HTTP headers sent with every request.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX_CONNECTION,
        extra="ignore",
        frozen=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the OpenAI-compatible API",
        examples=["https://api.openai.com", "http://192.168.86.201:8000"],
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key sent as a bearer token",
    )
    project_id: str | None = Field(
        default=None,
        description="Project identifier sent as the OpenAI-Project header",
    )
    organization_id: str | None = Field(
        default=None,
        description="Organization identifier sent as the OpenAI-Organization header",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP headers sent with every request",
    )


__all__ = ["ModelOpenAiConnectionConfig"]
