"""Security: Firebase ID token verification for callers."""

from app.infrastructure.security.id_token import FirebaseTokenVerifier

__all__ = ["FirebaseTokenVerifier"]
