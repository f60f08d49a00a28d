"""DTOs for account provisioning (no dependency on HTTP or Firebase types)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CallerContext:
    """Authenticated caller of a callable operation (verified ID token)."""

    uid: str
    claims: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreateAccountCommand:
    """Input of createUserAndProfile. Fields may be None/empty until validated."""

    name: str | None
    email: str | None
    password: str | None
    department: str | None
    role: str | None
    phone_number: str | None = None


@dataclass(frozen=True)
class ProfileData:
    """Profile document content keyed by account uid (createdAt is set server-side)."""

    uid: str
    name: str
    email: str
    phone_number: str
    department: str
    role: str


@dataclass(frozen=True)
class ProvisionResult:
    """Result of a successful createUserAndProfile call."""

    success: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "message": self.message}
