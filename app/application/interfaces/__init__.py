"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IProfileStore
from app.application.interfaces.services import IIdentityProvider

__all__ = [
    "IIdentityProvider",
    "IProfileStore",
]
