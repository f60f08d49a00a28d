"""Firebase Authentication adapter (Identity Toolkit REST v1, no firebase-admin).

Implements IIdentityProvider. Provider error codes are classified here, once,
into IdentityErrorKind; nothing above this module looks at raw codes.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from app.domain.enums import IdentityErrorKind
from app.domain.exceptions import IdentityProviderError
from app.infrastructure.firebase._credentials import TokenSource

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_TOOLKIT_BASE_URL = "https://identitytoolkit.googleapis.com/v1"

# Firebase rejects custom claims payloads above this size.
MAX_CLAIMS_PAYLOAD_LENGTH = 1000

_ERROR_KINDS: dict[str, IdentityErrorKind] = {
    "EMAIL_EXISTS": IdentityErrorKind.EMAIL_ALREADY_EXISTS,
    "DUPLICATE_EMAIL": IdentityErrorKind.EMAIL_ALREADY_EXISTS,
    "WEAK_PASSWORD": IdentityErrorKind.WEAK_PASSWORD,
    "USER_NOT_FOUND": IdentityErrorKind.USER_NOT_FOUND,
    "INVALID_EMAIL": IdentityErrorKind.INVALID_EMAIL,
    "INVALID_PHONE_NUMBER": IdentityErrorKind.INVALID_PHONE_NUMBER,
    "PHONE_NUMBER_EXISTS": IdentityErrorKind.PHONE_NUMBER_ALREADY_EXISTS,
    "DUPLICATE_PHONE_NUMBER": IdentityErrorKind.PHONE_NUMBER_ALREADY_EXISTS,
}


def classify_error_code(code: str | None) -> IdentityErrorKind:
    """Map a raw Identity Toolkit error code onto IdentityErrorKind."""
    if not code:
        return IdentityErrorKind.UNKNOWN
    return _ERROR_KINDS.get(code.strip().upper(), IdentityErrorKind.UNKNOWN)


def _parse_error(resp: httpx.Response) -> IdentityProviderError:
    """Build an IdentityProviderError from an error response.

    Messages look like "EMAIL_EXISTS" or "WEAK_PASSWORD : Password should be
    at least 6 characters"; the part before " : " is the code.
    """
    message = ""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = str(body["error"].get("message") or "")
    if not message:
        message = f"Identity Toolkit request failed with HTTP {resp.status_code}"
        return IdentityProviderError(IdentityErrorKind.UNKNOWN, message)
    code, _, detail = message.partition(" : ")
    return IdentityProviderError(
        classify_error_code(code),
        detail.strip() or message,
        code=code.strip(),
    )


class FirebaseIdentityProvider:
    """Account management against the Identity Toolkit admin endpoints."""

    def __init__(
        self,
        project_id: str,
        token_source: TokenSource,
        *,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_IDENTITY_TOOLKIT_BASE_URL,
    ) -> None:
        self._project_id = project_id
        self._tokens = token_source
        self._http = http_client
        self._accounts_url = f"{base_url.rstrip('/')}/projects/{project_id}/accounts"

    async def _post(self, url: str, body: dict[str, Any]) -> dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {await self._tokens.get_token()}",
        }
        try:
            resp = await self._http.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            raise IdentityProviderError(
                IdentityErrorKind.UNKNOWN, f"Identity Toolkit request failed: {e}"
            ) from e
        if resp.status_code >= 400:
            err = _parse_error(resp)
            logger.debug("Identity Toolkit error %s (%s)", err.code, err.kind.value)
            raise err
        return resp.json() if resp.content else {}

    async def create_account(
        self,
        email: str,
        password: str,
        display_name: str,
        phone_number: str | None = None,
    ) -> str:
        """Create an email/password account; return its uid (localId)."""
        body: dict[str, Any] = {
            "email": email,
            "password": password,
            "displayName": display_name,
        }
        if phone_number:
            body["phoneNumber"] = phone_number
        out = await self._post(self._accounts_url, body)
        uid = out.get("localId")
        if not uid:
            raise IdentityProviderError(
                IdentityErrorKind.UNKNOWN, "Identity Toolkit response missing localId"
            )
        return uid

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        """Replace the account's custom claims (serialized JSON, max 1000 chars)."""
        payload = json.dumps(claims, separators=(",", ":"))
        if len(payload) > MAX_CLAIMS_PAYLOAD_LENGTH:
            raise IdentityProviderError(
                IdentityErrorKind.UNKNOWN,
                f"Custom claims payload must not exceed {MAX_CLAIMS_PAYLOAD_LENGTH} characters",
            )
        await self._post(
            f"{self._accounts_url}:update",
            {"localId": uid, "customAttributes": payload},
        )

    async def delete_account(self, uid: str) -> None:
        """Delete the account; USER_NOT_FOUND surfaces as IdentityErrorKind.USER_NOT_FOUND."""
        await self._post(f"{self._accounts_url}:delete", {"localId": uid})
