"""Delete the identity account when its users/{userId} profile is deleted."""

from __future__ import annotations

import logging

from app.application.interfaces import IIdentityProvider
from app.domain.enums import IdentityErrorKind
from app.domain.exceptions import IdentityProviderError, InternalException
from app.shared.telemetry import traced

logger = logging.getLogger(__name__)


class ProfileDeletionWatcher:
    """Handler for profile-document deletion events (deleteUserAuthOnProfileDelete).

    Idempotent: an account that is already gone counts as deleted. Does not
    touch the document store.
    """

    def __init__(self, identity: IIdentityProvider) -> None:
        self._identity = identity

    @traced("profile_deletion_watcher.on_profile_deleted")
    async def on_profile_deleted(self, *, user_id: str) -> None:
        """Delete account user_id; raise InternalException on provider failure."""
        try:
            await self._identity.delete_account(user_id)
        except IdentityProviderError as e:
            if e.kind is IdentityErrorKind.USER_NOT_FOUND:
                logger.warning(
                    "Auth user with UID %s not found, likely already deleted", user_id
                )
                return None
            logger.error(
                "Failed to delete Auth account for UID %s: %s", user_id, e.message
            )
            raise InternalException(f"Failed to delete Auth account: {e.message}") from e
        except Exception as e:
            logger.exception("Failed to delete Auth account for UID %s", user_id)
            raise InternalException(f"Failed to delete Auth account: {e}") from e

        logger.info("Auth account for UID %s deleted", user_id)
        return None
