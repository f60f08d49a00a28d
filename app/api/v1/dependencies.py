"""Presentation-layer dependency injection (composition root).

Handlers are built per request from the process-wide FirebasePlatform held on
app.state.platform; routes depend only on these functions. Tests replace them
through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.account import CallerContext
from app.application.interfaces import IIdentityProvider, IProfileStore
from app.application.services import AccountProvisioner, ProfileDeletionWatcher
from app.domain.exceptions import InternalException
from app.infrastructure.firebase import FirebasePlatform
from app.infrastructure.firebase.repositories import FirestoreProfileRepository
from app.infrastructure.security import FirebaseTokenVerifier

_bearer = HTTPBearer(auto_error=False)


def get_platform(request: Request) -> FirebasePlatform:
    """Return the platform handle created at startup.

    Raises:
        InternalException: Firebase credentials were not configured.
    """
    platform = getattr(request.app.state, "platform", None)
    if platform is None:
        raise InternalException("Firebase is not configured")
    return platform


def get_identity_provider(
    platform: Annotated[FirebasePlatform, Depends(get_platform)],
) -> IIdentityProvider:
    return platform.identity


def get_profile_store(
    platform: Annotated[FirebasePlatform, Depends(get_platform)],
) -> IProfileStore:
    return FirestoreProfileRepository(platform.firestore)


def get_account_provisioner(
    identity: Annotated[IIdentityProvider, Depends(get_identity_provider)],
    profiles: Annotated[IProfileStore, Depends(get_profile_store)],
) -> AccountProvisioner:
    return AccountProvisioner(identity, profiles)


def get_profile_deletion_watcher(
    identity: Annotated[IIdentityProvider, Depends(get_identity_provider)],
) -> ProfileDeletionWatcher:
    return ProfileDeletionWatcher(identity)


async def get_caller(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> CallerContext | None:
    """Verify the Bearer ID token if present.

    Returns None when no Authorization header is sent (the handler decides
    what that means). A header with an invalid token raises
    UnauthenticatedException from the verifier.
    """
    if credentials is None or not credentials.credentials:
        return None
    verifier = FirebaseTokenVerifier(get_platform(request).project_id)
    return await verifier.verify(credentials.credentials)
