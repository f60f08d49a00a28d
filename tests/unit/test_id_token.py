"""Tests for FirebaseTokenVerifier (google-auth verification is patched)."""

from unittest.mock import patch

import pytest

from app.domain.exceptions import UnauthenticatedException
from app.infrastructure.security.id_token import FirebaseTokenVerifier

VERIFY = "app.infrastructure.security.id_token.id_token.verify_firebase_token"


async def test_valid_token_returns_caller_context() -> None:
    claims = {
        "iss": "https://securetoken.google.com/demo-project",
        "aud": "demo-project",
        "sub": "caller-1",
        "role": "admin",
    }
    with patch(VERIFY, return_value=claims) as m_verify:
        caller = await FirebaseTokenVerifier("demo-project").verify("tok")
    assert caller.uid == "caller-1"
    assert caller.claims["role"] == "admin"
    assert m_verify.call_args.kwargs["audience"] == "demo-project"


async def test_invalid_signature_is_unauthenticated() -> None:
    with patch(VERIFY, side_effect=ValueError("Token expired")):
        with pytest.raises(UnauthenticatedException):
            await FirebaseTokenVerifier("demo-project").verify("tok")


async def test_wrong_issuer_is_unauthenticated() -> None:
    claims = {"iss": "https://accounts.google.com", "sub": "caller-1"}
    with patch(VERIFY, return_value=claims):
        with pytest.raises(UnauthenticatedException):
            await FirebaseTokenVerifier("demo-project").verify("tok")


async def test_missing_subject_is_unauthenticated() -> None:
    claims = {"iss": "https://securetoken.google.com/demo-project"}
    with patch(VERIFY, return_value=claims):
        with pytest.raises(UnauthenticatedException):
            await FirebaseTokenVerifier("demo-project").verify("tok")
