"""Callable protocol schemas ({"data": ...} in, {"result": ...} out)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CallableRequest(BaseModel):
    """Envelope of every callable request."""

    data: Any = None


class CreateUserAndProfileData(BaseModel):
    """Payload of createUserAndProfile. Presence is checked by the handler, not here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    department: str | None = None
    role: str | None = None


class ProvisionResultBody(BaseModel):
    success: bool
    message: str


class CreateUserAndProfileResponse(BaseModel):
    """Success envelope of createUserAndProfile."""

    result: ProvisionResultBody


class CallableErrorBody(BaseModel):
    status: str = Field(..., description="UNAUTHENTICATED | INVALID_ARGUMENT | INTERNAL")
    message: str
    details: dict[str, Any] | None = None


class CallableErrorResponse(BaseModel):
    """Error envelope of every callable function."""

    error: CallableErrorBody
