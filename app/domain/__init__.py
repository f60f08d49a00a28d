"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import CallableStatus, IdentityErrorKind
from app.domain.exceptions import (
    FirestoreError,
    IdentityProviderError,
    InternalException,
    InvalidArgumentException,
    ProvisioningException,
    UnauthenticatedException,
)

__all__ = [
    # Enums
    "CallableStatus",
    "IdentityErrorKind",
    # Exceptions
    "FirestoreError",
    "IdentityProviderError",
    "InternalException",
    "InvalidArgumentException",
    "ProvisioningException",
    "UnauthenticatedException",
]
