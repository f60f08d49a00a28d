"""Firestore-backed repository implementations."""

from app.infrastructure.firebase.repositories.profile_repo_firestore import (
    FirestoreProfileRepository,
)

__all__ = [
    "FirestoreProfileRepository",
]
