"""Unit tests for the Firestore REST write path and FirestoreProfileRepository."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from app.application.dtos.account import ProfileData
from app.domain.exceptions import FirestoreError
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import (
    SERVER_TIMESTAMP,
    encode_value,
    encode_write,
)
from app.infrastructure.firebase.repositories import FirestoreProfileRepository

BASE = "https://firestore.test/v1"
DB = "projects/demo-project/databases/(default)"


def _client(handler, token_source) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirestoreRESTClient("demo-project", token_source, http_client=http, base_url=BASE)


def test_encode_value_types() -> None:
    assert encode_value(None) == {"nullValue": None}
    assert encode_value(True) == {"booleanValue": True}
    assert encode_value(3) == {"integerValue": "3"}
    assert encode_value("x") == {"stringValue": "x"}
    assert encode_value(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)) == {
        "timestampValue": "2024-01-02T03:04:05.000000Z"
    }
    assert encode_value(["a"]) == {"arrayValue": {"values": [{"stringValue": "a"}]}}
    with pytest.raises(TypeError):
        encode_value(object())


def test_encode_write_turns_server_timestamp_into_transform() -> None:
    write = encode_write(f"{DB}/documents/users/u1", {"name": "A", "createdAt": SERVER_TIMESTAMP})
    assert write["update"]["fields"] == {"name": {"stringValue": "A"}}
    assert write["updateTransforms"] == [
        {"fieldPath": "createdAt", "setToServerValue": "REQUEST_TIME"}
    ]


def test_encode_write_nested_server_timestamp_uses_dotted_path() -> None:
    write = encode_write("doc", {"meta": {"at": SERVER_TIMESTAMP, "by": "x"}})
    assert write["update"]["fields"] == {
        "meta": {"mapValue": {"fields": {"by": {"stringValue": "x"}}}}
    }
    assert write["updateTransforms"][0]["fieldPath"] == "meta.at"


def test_encode_write_without_sentinel_has_no_transforms() -> None:
    assert "updateTransforms" not in encode_write("doc", {"a": 1})


def test_server_timestamp_inside_array_is_rejected() -> None:
    with pytest.raises(TypeError):
        encode_write("doc", {"a": [SERVER_TIMESTAMP]})


def test_document_id_with_slash_is_rejected(token_source) -> None:
    client = _client(lambda r: httpx.Response(200, json={}), token_source)
    with pytest.raises(ValueError):
        client.collection("users").document("a/b")


async def test_save_profile_commits_fields_and_server_timestamp(token_source) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"commitTime": "2024-01-01T00:00:00Z"})

    repo = FirestoreProfileRepository(_client(handler, token_source))
    await repo.save_profile(
        ProfileData(
            uid="uid-1",
            name="Alice",
            email="a@example.com",
            phone_number="",
            department="Eng",
            role="admin",
        )
    )

    request = seen[0]
    assert str(request.url) == f"{BASE}/{DB}/documents:commit"
    assert request.headers["Authorization"] == "Bearer test-access-token"
    (write,) = json.loads(request.content)["writes"]
    assert write["update"]["name"] == f"{DB}/documents/users/uid-1"
    assert write["update"]["fields"] == {
        "name": {"stringValue": "Alice"},
        "email": {"stringValue": "a@example.com"},
        "phoneNumber": {"stringValue": ""},
        "department": {"stringValue": "Eng"},
        "role": {"stringValue": "admin"},
        "uid": {"stringValue": "uid-1"},
    }
    assert write["updateTransforms"] == [
        {"fieldPath": "createdAt", "setToServerValue": "REQUEST_TIME"}
    ]
    assert "updateMask" not in write


async def test_commit_error_raises_firestore_error(token_source) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            403, json={"error": {"code": 403, "message": "Missing or insufficient permissions."}}
        )

    with pytest.raises(FirestoreError) as exc_info:
        await _client(handler, token_source).collection("users").document("u1").set({"a": 1})
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Missing or insufficient permissions."
