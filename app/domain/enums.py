"""Domain enumerations for the user provisioning service.

Enums represent fixed sets of domain values (error kinds, callable statuses).
"""

from enum import Enum


class CallableStatus(str, Enum):
    """Error status sent in the callable-protocol error envelope."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL = "INTERNAL"

    @property
    def http_status(self) -> int:
        """HTTP status code paired with this callable status."""
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[CallableStatus, int] = {
    CallableStatus.UNAUTHENTICATED: 401,
    CallableStatus.INVALID_ARGUMENT: 400,
    CallableStatus.INTERNAL: 500,
}


class IdentityErrorKind(str, Enum):
    """Closed classification of identity provider failures.

    Raw provider codes are mapped onto these once, in the identity adapter;
    handlers match on the kind and never on provider strings.
    """

    EMAIL_ALREADY_EXISTS = "email-already-exists"
    WEAK_PASSWORD = "weak-password"
    USER_NOT_FOUND = "user-not-found"
    INVALID_EMAIL = "invalid-email"
    INVALID_PHONE_NUMBER = "invalid-phone-number"
    PHONE_NUMBER_ALREADY_EXISTS = "phone-number-already-exists"
    UNKNOWN = "unknown"
