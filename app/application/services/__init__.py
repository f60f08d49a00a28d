"""Application services: account provisioning and profile-deletion handling."""

from app.application.services.account_provisioner import AccountProvisioner
from app.application.services.profile_deletion_watcher import ProfileDeletionWatcher

__all__ = [
    "AccountProvisioner",
    "ProfileDeletionWatcher",
]
