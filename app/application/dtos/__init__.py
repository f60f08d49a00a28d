"""Application DTOs (no HTTP or Firebase dependency)."""

from app.application.dtos.account import (
    CallerContext,
    CreateAccountCommand,
    ProfileData,
    ProvisionResult,
)

__all__ = [
    "CallerContext",
    "CreateAccountCommand",
    "ProfileData",
    "ProvisionResult",
]
