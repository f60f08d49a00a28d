"""Unit tests for FirebaseIdentityProvider (REST calls and error classification)."""

import json

import httpx
import pytest

from app.domain.enums import IdentityErrorKind
from app.domain.exceptions import IdentityProviderError
from app.infrastructure.firebase.identity import (
    FirebaseIdentityProvider,
    classify_error_code,
)

BASE = "https://identitytoolkit.test/v1"
ACCOUNTS = f"{BASE}/projects/demo-project/accounts"


def _provider(handler, token_source) -> FirebaseIdentityProvider:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirebaseIdentityProvider(
        "demo-project", token_source, http_client=http, base_url=BASE
    )


def _error(message: str, status: int = 400) -> httpx.Response:
    return httpx.Response(status, json={"error": {"code": status, "message": message}})


@pytest.mark.parametrize(
    ("code", "kind"),
    [
        ("EMAIL_EXISTS", IdentityErrorKind.EMAIL_ALREADY_EXISTS),
        ("WEAK_PASSWORD", IdentityErrorKind.WEAK_PASSWORD),
        ("USER_NOT_FOUND", IdentityErrorKind.USER_NOT_FOUND),
        ("INVALID_PHONE_NUMBER", IdentityErrorKind.INVALID_PHONE_NUMBER),
        ("PHONE_NUMBER_EXISTS", IdentityErrorKind.PHONE_NUMBER_ALREADY_EXISTS),
        ("QUOTA_EXCEEDED", IdentityErrorKind.UNKNOWN),
        (None, IdentityErrorKind.UNKNOWN),
    ],
)
def test_classify_error_code(code: str | None, kind: IdentityErrorKind) -> None:
    assert classify_error_code(code) is kind


async def test_create_account_posts_fields_and_returns_local_id(token_source) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"localId": "new-uid", "email": "a@example.com"})

    uid = await _provider(handler, token_source).create_account(
        email="a@example.com", password="secret1", display_name="Alice"
    )

    assert uid == "new-uid"
    request = seen[0]
    assert str(request.url) == ACCOUNTS
    assert request.headers["Authorization"] == "Bearer test-access-token"
    assert json.loads(request.content) == {
        "email": "a@example.com",
        "password": "secret1",
        "displayName": "Alice",
    }


async def test_create_account_includes_phone_number_when_given(token_source) -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"localId": "uid"})

    await _provider(handler, token_source).create_account(
        email="a@example.com",
        password="secret1",
        display_name="Alice",
        phone_number="+15550100",
    )
    assert bodies[0]["phoneNumber"] == "+15550100"


async def test_create_account_duplicate_email_is_classified(token_source) -> None:
    provider = _provider(lambda r: _error("EMAIL_EXISTS"), token_source)
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.create_account(
            email="a@example.com", password="secret1", display_name="Alice"
        )
    assert exc_info.value.kind is IdentityErrorKind.EMAIL_ALREADY_EXISTS
    assert exc_info.value.code == "EMAIL_EXISTS"


async def test_weak_password_message_detail_is_kept(token_source) -> None:
    provider = _provider(
        lambda r: _error("WEAK_PASSWORD : Password should be at least 6 characters"),
        token_source,
    )
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.create_account(
            email="a@example.com", password="secret1", display_name="Alice"
        )
    assert exc_info.value.kind is IdentityErrorKind.WEAK_PASSWORD
    assert exc_info.value.message == "Password should be at least 6 characters"


async def test_create_account_without_local_id_is_unknown_error(token_source) -> None:
    provider = _provider(lambda r: httpx.Response(200, json={}), token_source)
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.create_account(
            email="a@example.com", password="secret1", display_name="Alice"
        )
    assert exc_info.value.kind is IdentityErrorKind.UNKNOWN


async def test_set_custom_claims_sends_json_string(token_source) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"localId": "uid-1"})

    await _provider(handler, token_source).set_custom_claims("uid-1", {"role": "admin"})

    assert str(seen[0].url) == f"{ACCOUNTS}:update"
    assert json.loads(seen[0].content) == {
        "localId": "uid-1",
        "customAttributes": '{"role":"admin"}',
    }


async def test_set_custom_claims_rejects_oversized_payload(token_source) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(IdentityProviderError):
        await _provider(handler, token_source).set_custom_claims("uid-1", {"role": "x" * 1000})


async def test_delete_account_not_found_is_classified(token_source) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return _error("USER_NOT_FOUND")

    with pytest.raises(IdentityProviderError) as exc_info:
        await _provider(handler, token_source).delete_account("u404")
    assert exc_info.value.kind is IdentityErrorKind.USER_NOT_FOUND
    assert str(seen[0].url) == f"{ACCOUNTS}:delete"
    assert json.loads(seen[0].content) == {"localId": "u404"}


async def test_non_json_error_body_is_unknown(token_source) -> None:
    provider = _provider(lambda r: httpx.Response(503, text="upstream down"), token_source)
    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.delete_account("u1")
    assert exc_info.value.kind is IdentityErrorKind.UNKNOWN
    assert "503" in exc_info.value.message


async def test_transport_error_is_unknown(token_source) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(IdentityProviderError) as exc_info:
        await _provider(handler, token_source).delete_account("u1")
    assert exc_info.value.kind is IdentityErrorKind.UNKNOWN
