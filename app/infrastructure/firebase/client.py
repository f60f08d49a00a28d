"""Firebase platform handle (Identity Toolkit + Firestore over REST).

Built once at app startup from either FIREBASE_SERVICE_ACCOUNT_KEY (JSON
string) or FIREBASE_SERVICE_ACCOUNT_PATH (file path), stored on app.state
and handed to handlers through dependencies. One httpx.AsyncClient is shared
by both adapters and closed with the handle.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from app.core.config import Settings
from app.infrastructure.firebase._credentials import TokenSource, get_credentials
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.identity import FirebaseIdentityProvider

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path, or None if unset.

    Raises:
        ValueError: The key is set but is not valid JSON.
    """
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


@dataclass
class FirebasePlatform:
    """Process-lifetime access to the identity provider and the document store."""

    project_id: str
    identity: FirebaseIdentityProvider
    firestore: FirestoreRESTClient
    http_client: httpx.AsyncClient
    owns_http_client: bool = True

    @classmethod
    def from_credentials(
        cls,
        project_id: str,
        credentials,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> FirebasePlatform:
        """Wire both adapters around one token source and one HTTP client."""
        owns = http_client is None
        http = http_client or httpx.AsyncClient(timeout=settings.http_timeout_seconds)
        tokens = TokenSource(credentials)
        return cls(
            project_id=project_id,
            identity=FirebaseIdentityProvider(
                project_id,
                tokens,
                http_client=http,
                base_url=settings.identity_toolkit_base_url,
            ),
            firestore=FirestoreRESTClient(
                project_id,
                tokens,
                http_client=http,
                base_url=settings.firestore_base_url,
            ),
            http_client=http,
            owns_http_client=owns,
        )

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self.owns_http_client:
            await self.http_client.aclose()


def init_firebase_platform(settings: Settings) -> FirebasePlatform | None:
    """Build the platform handle from settings.

    Safe to call when no credentials are configured (returns None). On
    malformed credentials or any initialization error, logs the exception
    and returns None so the app can start and report not-ready.
    """
    if not settings.firebase_configured:
        logger.info("Firebase credentials not set; platform disabled")
        return None

    try:
        key_dict = _load_key_dict(settings)
        if not key_dict:
            return None

        project_id = settings.firebase_project_id or key_dict.get("project_id")
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return None

        credentials = get_credentials(key_dict)
        platform = FirebasePlatform.from_credentials(project_id, credentials, settings)
        logger.info("Firebase platform initialized for project %s", project_id)
        return platform
    except Exception:
        logger.exception("Firebase initialization failed")
        return None
