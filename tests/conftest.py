"""Pytest configuration and fixtures.

HTTP tests run against a fresh app from app.main.create_app() through
httpx.ASGITransport. Firebase collaborators are replaced with AsyncMock
fakes via app.dependency_overrides; no network access is needed.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.v1.dependencies import (
    get_caller,
    get_identity_provider,
    get_profile_store,
)
from app.application.dtos.account import CallerContext
from app.main import create_app

TEST_UID = "uid-123"


class StaticTokenSource:
    """TokenSource stand-in that never talks to Google."""

    async def get_token(self) -> str:
        return "test-access-token"


@pytest.fixture
def token_source() -> StaticTokenSource:
    return StaticTokenSource()


@pytest.fixture
def identity() -> AsyncMock:
    """Identity provider fake: create_account returns TEST_UID."""
    fake = AsyncMock()
    fake.create_account.return_value = TEST_UID
    return fake


@pytest.fixture
def profiles() -> AsyncMock:
    """Profile store fake."""
    return AsyncMock()


@pytest.fixture
def caller() -> CallerContext:
    return CallerContext(uid="admin-1", claims={"role": "admin"})


@pytest.fixture
def app(identity: AsyncMock, profiles: AsyncMock, caller: CallerContext) -> FastAPI:
    """App with fakes for the identity provider, profile store and caller."""
    application = create_app()
    application.dependency_overrides[get_identity_provider] = lambda: identity
    application.dependency_overrides[get_profile_store] = lambda: profiles
    application.dependency_overrides[get_caller] = lambda: caller
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
