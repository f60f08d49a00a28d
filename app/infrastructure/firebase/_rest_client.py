"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Writes go through documents:commit so server-side field transforms
(SERVER_TIMESTAMP) are applied in the same write.
"""

from __future__ import annotations

from typing import Any

import httpx

from app.domain.exceptions import FirestoreError
from app.infrastructure.firebase._credentials import TokenSource
from app.infrastructure.firebase._rest_encoding import encode_write

DEFAULT_FIRESTORE_BASE_URL = "https://firestore.googleapis.com/v1"


def _error_message(resp: httpx.Response) -> str:
    """Return the API error message from a Firestore error body, or the status text."""
    try:
        body = resp.json()
    except ValueError:
        return f"Firestore request failed with HTTP {resp.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"Firestore request failed with HTTP {resp.status_code}"


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (full replace, server transforms applied)."""
        await self._client.commit([encode_write(self._client.document_name(self._path), data)])


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.strip("/")

    def document(self, document_id: str) -> DocumentReference:
        if not document_id or "/" in document_id:
            raise ValueError(f"Invalid document id: {document_id!r}")
        return DocumentReference(self._client, f"{self._path}/{document_id}")


class FirestoreRESTClient:
    """Lightweight Firestore client using the REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        token_source: TokenSource,
        *,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_FIRESTORE_BASE_URL,
    ) -> None:
        self._project_id = project_id
        self._tokens = token_source
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._database = f"projects/{project_id}/databases/(default)"

    def document_name(self, path: str) -> str:
        """Full resource name for a database-relative document path."""
        return f"{self._database}/documents/{path}"

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, collection_id)

    async def commit(self, writes: list[dict[str, Any]]) -> dict:
        """Apply writes atomically via documents:commit; return the commit response.

        Raises:
            FirestoreError: On any non-2xx response or transport failure.
        """
        url = f"{self._base_url}/{self._database}/documents:commit"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {await self._tokens.get_token()}",
        }
        try:
            resp = await self._http.post(url, headers=headers, json={"writes": writes})
        except httpx.HTTPError as e:
            raise FirestoreError(f"Firestore request failed: {e}") from e
        if resp.status_code >= 400:
            raise FirestoreError(_error_message(resp), status_code=resp.status_code)
        return resp.json() if resp.content else {}
