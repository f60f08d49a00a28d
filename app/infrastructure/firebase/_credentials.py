"""Service-account credentials and access tokens for the Firebase REST APIs."""

from __future__ import annotations

import asyncio

from google.auth.transport.requests import Request
from google.oauth2 import service_account

# cloud-platform covers Firestore; identitytoolkit is required by the Auth admin endpoints.
FIREBASE_SCOPES = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/identitytoolkit",
)


def get_credentials(key_dict: dict) -> service_account.Credentials:
    """Return service account credentials scoped for Firestore and Identity Toolkit."""
    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=list(FIREBASE_SCOPES)
    )


def _get_access_token(credentials) -> str:
    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


class TokenSource:
    """Hands out bearer tokens; refresh runs in a worker thread (google-auth is sync)."""

    def __init__(self, credentials) -> None:
        self._credentials = credentials

    async def get_token(self) -> str:
        return await asyncio.to_thread(_get_access_token, self._credentials)
