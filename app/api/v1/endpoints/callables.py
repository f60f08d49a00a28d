"""Callable functions: thin routes speaking the callable protocol.

Request {"data": {...}} -> 200 {"result": {...}}; errors use the
{"error": {"status", "message"}} envelope from the exception handlers.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from app.api.v1.dependencies import get_account_provisioner, get_caller
from app.application.dtos.account import CallerContext, CreateAccountCommand
from app.application.services import AccountProvisioner
from app.core.constants import FUNCTION_CREATE_USER_AND_PROFILE, MSG_UNAUTHENTICATED
from app.domain.exceptions import InvalidArgumentException, UnauthenticatedException
from app.schemas.callable import (
    CallableErrorResponse,
    CallableRequest,
    CreateUserAndProfileData,
    CreateUserAndProfileResponse,
)

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": CallableErrorResponse, "description": "INVALID_ARGUMENT"},
    401: {"model": CallableErrorResponse, "description": "UNAUTHENTICATED"},
    500: {"model": CallableErrorResponse, "description": "INTERNAL"},
}


def _to_command(data: Any) -> CreateAccountCommand:
    """Parse callable data into a command; wrong shapes are INVALID_ARGUMENT."""
    if not isinstance(data, dict):
        raise InvalidArgumentException("Request data must be an object.")
    try:
        parsed = CreateUserAndProfileData.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ()))
        raise InvalidArgumentException(
            f"Invalid value for '{field}': {first.get('msg')}", field=field or None
        ) from e
    return CreateAccountCommand(
        name=parsed.name,
        email=parsed.email,
        password=parsed.password,
        department=parsed.department,
        role=parsed.role,
        phone_number=parsed.phone_number,
    )


@router.post(
    f"/{FUNCTION_CREATE_USER_AND_PROFILE}",
    response_model=CreateUserAndProfileResponse,
    responses=_ERROR_RESPONSES,
)
async def create_user_and_profile(
    body: CallableRequest,
    caller: Annotated[CallerContext | None, Depends(get_caller)],
    provisioner: Annotated[AccountProvisioner, Depends(get_account_provisioner)],
) -> CreateUserAndProfileResponse:
    """Create an Auth account, its users/{uid} profile and the role claim."""
    # Auth is checked before the payload is parsed
    if caller is None:
        raise UnauthenticatedException(MSG_UNAUTHENTICATED)
    result = await provisioner.provision(_to_command(body.data), caller)
    return CreateUserAndProfileResponse(result=result.to_dict())
