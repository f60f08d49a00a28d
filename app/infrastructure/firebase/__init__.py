"""Firebase Authentication and Firestore integration (REST, no firebase-admin)."""

from app.infrastructure.firebase.client import (
    FirebasePlatform,
    init_firebase_platform,
)

__all__ = [
    "FirebasePlatform",
    "init_firebase_platform",
]
