"""
Pydantic models for the model availability service payloads.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# (model_id, client_id)
CompositeKey = Tuple[str, str]


class ReasonKind(str, Enum):
    """Known unavailability causes. OTHER covers values this client doesn't know."""

    QUOTA_EXCEEDED = "quota_exceeded"
    SUSPENDED = "suspended"
    COOLDOWN = "cooldown"
    OTHER = "other"


class Reason(BaseModel):
    """Tagged unavailability reason; ``text`` holds the raw or free-text cause for OTHER."""

    kind: ReasonKind
    text: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, reason: Optional[str], reason_text: Optional[str] = None) -> "Reason":
        known = {
            ReasonKind.QUOTA_EXCEEDED.value: ReasonKind.QUOTA_EXCEEDED,
            ReasonKind.SUSPENDED.value: ReasonKind.SUSPENDED,
            ReasonKind.COOLDOWN.value: ReasonKind.COOLDOWN,
        }
        raw = reason or ""
        if raw in known:
            return cls(kind=known[raw], text=reason_text or None)
        return cls(kind=ReasonKind.OTHER, text=reason_text or raw)


class UnavailableModel(BaseModel):
    """A server-reported fact that a model is inaccessible to a given client."""

    model_id: str = Field(min_length=1)
    model_name: Optional[str] = None
    provider: Optional[str] = None
    client_id: str
    reason: str = ""
    reason_text: Optional[str] = None
    since: str = ""

    # "model_" prefixed fields are part of the wire format
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    @field_validator("since", mode="before")
    @classmethod
    def _coerce_since(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @property
    def key(self) -> CompositeKey:
        return (self.model_id, self.client_id)

    @property
    def parsed_reason(self) -> Reason:
        return Reason.parse(self.reason, self.reason_text)


class UnavailableModelsResponse(BaseModel):
    """Response model for the list endpoint."""

    models: List[UnavailableModel] = Field(default_factory=list)
    count: int = 0


class ResetModelAvailabilityRequest(BaseModel):
    """Request body for the reset endpoint."""

    client_id: str = Field(min_length=1)


class ResetModelAvailabilityResponse(BaseModel):
    """Response model for the reset endpoint. Advisory only."""

    status: str = ""
    message: str = ""
    model_id: str = ""
    client_id: str = ""

    model_config = ConfigDict(extra="allow", protected_namespaces=())


class DisableModelRequest(BaseModel):
    """Request body for marking a model unavailable on the reference service."""

    client_id: str = Field(min_length=1)
    reason: str = ReasonKind.COOLDOWN.value
    reason_text: Optional[str] = None
    model_name: Optional[str] = None
    provider: Optional[str] = None
    duration_seconds: Optional[int] = Field(None, ge=1)

    model_config = ConfigDict(protected_namespaces=())


__all__ = [
    "CompositeKey",
    "ReasonKind",
    "Reason",
    "UnavailableModel",
    "UnavailableModelsResponse",
    "ResetModelAvailabilityRequest",
    "ResetModelAvailabilityResponse",
    "DisableModelRequest",
]
