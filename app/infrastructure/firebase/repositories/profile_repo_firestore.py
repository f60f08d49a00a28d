"""Firestore-backed profile store (implements IProfileStore)."""

from __future__ import annotations

from app.application.dtos.account import ProfileData
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.infrastructure.firebase.collections import COLLECTION_USERS


class FirestoreProfileRepository:
    """Writes users/{uid} profile documents read by the mobile app."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._coll = client.collection(COLLECTION_USERS)

    @staticmethod
    def to_document(profile: ProfileData) -> dict:
        """Return the stored field layout (camelCase, as the app reads it)."""
        return {
            "name": profile.name,
            "email": profile.email,
            "phoneNumber": profile.phone_number,
            "department": profile.department,
            "role": profile.role,
            "createdAt": SERVER_TIMESTAMP,
            "uid": profile.uid,
        }

    async def save_profile(self, profile: ProfileData) -> None:
        """Create or overwrite users/{uid}; createdAt is the server's request time."""
        await self._coll.document(profile.uid).set(self.to_document(profile))
