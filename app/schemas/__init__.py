"""Pydantic request/response schemas for the API."""

from app.schemas.callable import (
    CallableErrorResponse,
    CallableRequest,
    CreateUserAndProfileData,
    CreateUserAndProfileResponse,
)
from app.schemas.events import DocumentEvent, StructuredCloudEvent
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "CallableErrorResponse",
    "CallableRequest",
    "CreateUserAndProfileData",
    "CreateUserAndProfileResponse",
    "DocumentEvent",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "StructuredCloudEvent",
]
