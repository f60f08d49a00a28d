"""Firebase ID token verification for callable requests.

Uses google-auth (signature, expiry, audience) and checks the Firebase
issuer for the project. Verification fetches Google's public certs with a
blocking transport, so it runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.auth import exceptions as google_auth_exceptions
from google.auth.transport.requests import Request
from google.oauth2 import id_token

from app.application.dtos.account import CallerContext
from app.domain.exceptions import UnauthenticatedException

logger = logging.getLogger(__name__)

FIREBASE_ISSUER_PREFIX = "https://securetoken.google.com/"
MSG_INVALID_TOKEN = "Invalid or expired ID token"


class FirebaseTokenVerifier:
    """Verify Firebase ID tokens issued for one project."""

    def __init__(self, project_id: str, clock_skew_in_seconds: int = 10) -> None:
        self._project_id = project_id
        self._clock_skew = clock_skew_in_seconds
        self._issuer = f"{FIREBASE_ISSUER_PREFIX}{project_id}"

    def _verify_sync(self, token: str) -> dict[str, Any]:
        return id_token.verify_firebase_token(
            token,
            Request(),
            audience=self._project_id,
            clock_skew_in_seconds=self._clock_skew,
        )

    async def verify(self, token: str) -> CallerContext:
        """Return the caller context for a valid token.

        Raises:
            UnauthenticatedException: Token invalid, expired, for another
                project, or without a subject.
        """
        try:
            claims = await asyncio.to_thread(self._verify_sync, token)
        except (ValueError, google_auth_exceptions.GoogleAuthError) as e:
            logger.info("ID token rejected: %s", e)
            raise UnauthenticatedException(MSG_INVALID_TOKEN) from e
        if claims.get("iss") != self._issuer:
            logger.info("ID token rejected: unexpected issuer %s", claims.get("iss"))
            raise UnauthenticatedException(MSG_INVALID_TOKEN)
        uid = claims.get("sub") or claims.get("user_id")
        if not uid:
            raise UnauthenticatedException(MSG_INVALID_TOKEN)
        return CallerContext(uid=uid, claims=claims)
