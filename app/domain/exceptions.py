"""Domain exceptions for the user provisioning service.

Handler-level errors use a closed taxonomy (unauthenticated, invalid argument,
internal) that the presentation layer maps to the callable error envelope.
Collaborator errors (identity provider, Firestore) are separate types raised
only by infrastructure adapters; handlers translate them.
"""

from typing import Any

from app.domain.enums import CallableStatus, IdentityErrorKind


class ProvisioningException(Exception):
    """Base exception for all errors surfaced to callers.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code (a CallableStatus value).
        details: Additional error context (e.g. field, missing).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the callable-protocol error body: {"error": {status, message, details?}}."""
        error: dict[str, Any] = {"status": self.error_code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


class UnauthenticatedException(ProvisioningException):
    """Raised when the request carries no (valid) caller identity."""

    def __init__(self, message: str) -> None:
        super().__init__(message, CallableStatus.UNAUTHENTICATED.value)


class InvalidArgumentException(ProvisioningException):
    """Raised when input is missing or malformed, or the provider rejects it."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        missing: list[str] | None = None,
    ) -> None:
        """Initialize with message and optional offending field(s).

        Args:
            message: Description of the validation failure.
            field: Optional single field that failed validation.
            missing: Optional list of required fields that were absent.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if missing:
            details["missing"] = list(missing)
        super().__init__(message, CallableStatus.INVALID_ARGUMENT.value, details)


class InternalException(ProvisioningException):
    """Raised for any unexpected collaborator failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message, CallableStatus.INTERNAL.value)


class IdentityProviderError(Exception):
    """Failure reported by the identity provider, classified at the adapter boundary.

    Attributes:
        kind: Closed classification used by handlers.
        message: Provider message (or transport error text).
        code: Raw provider code, kept for logging only.
    """

    def __init__(
        self,
        kind: IdentityErrorKind,
        message: str,
        code: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.code = code
        super().__init__(message)


class FirestoreError(Exception):
    """Non-success response from the Firestore REST API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
