"""Pydantic models for ATLauncher API requests and responses.

These models match the wire contract of the ATLauncher API v1.
"""

from enum import Enum
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field, RootModel, field_validator, model_validator

# =============================================================================
# Constants
# =============================================================================

INVALID_API_KEY_MESSAGE = "API key missing or invalid!"
UNAUTHORIZED_CODE = 401
RATE_LIMITED_CODE = 429

API_KEY_HEADER = "API-KEY"

Method = Literal["GET", "POST", "PUT", "DELETE"]

BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "DELETE"})

# =============================================================================
# Request Descriptor
# =============================================================================


class RequestSpec(BaseModel):
    """A single request to the ATLauncher API.

    Required fields:
        url: Absolute URL (base + version + path)
        method: HTTP verb

    Optional fields:
        headers: Request headers (User-Agent, API-KEY)
        body: JSON payload, only for mutating verbs
    """

    url: str
    method: Method
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any | None = None

    @field_validator("url")
    @classmethod
    def url_is_absolute(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must be an absolute http(s) URL")
        return v

    @model_validator(mode="after")
    def body_only_for_mutating_verbs(self) -> "RequestSpec":
        if self.body is not None and self.method not in BODY_METHODS:
            raise ValueError(f"{self.method} requests cannot carry a body")
        return self


# =============================================================================
# Response Envelope
# =============================================================================


class ApiResponse(BaseModel):
    """Response envelope returned by every ATLauncher API endpoint."""

    error: bool = False
    code: int | None = None
    message: str | None = None
    data: Any = None

    model_config = {"extra": "allow"}

    @classmethod
    def from_http(cls, response: httpx.Response) -> "ApiResponse":
        """Parse an envelope from a raw HTTP response, whatever its status."""
        return cls.model_validate(response.json())

    @property
    def is_invalid_api_key(self) -> bool:
        return self.code == UNAUTHORIZED_CODE and self.message == INVALID_API_KEY_MESSAGE

    @property
    def is_rate_limited(self) -> bool:
        return self.code == RATE_LIMITED_CODE


# =============================================================================
# File Payload Codec
# =============================================================================


class Codec(str, Enum):
    """How a file payload is carried in the envelope's data field."""

    RAW = "raw"
    BASE64 = "base64"


# =============================================================================
# Request Payload Models
# =============================================================================


class UsernameList(RootModel[list[str]]):
    """Payload for allowed-player and tester list changes.

    Sent as a bare JSON array of Minecraft usernames.
    """

    @field_validator("root")
    @classmethod
    def usernames_not_blank(cls, v: list[str]) -> list[str]:
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("usernames must not be blank")
        return cleaned
