"""Application layer: interfaces, DTOs and handler services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (identity provider, profile store).
"""

from app.application.interfaces import IIdentityProvider, IProfileStore
from app.application.services import AccountProvisioner, ProfileDeletionWatcher

__all__ = [
    "AccountProvisioner",
    "IIdentityProvider",
    "IProfileStore",
    "ProfileDeletionWatcher",
]
