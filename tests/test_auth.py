"""Authentication gate tests."""

from types import SimpleNamespace

import pytest
from httpx import AsyncClient
from starlette.requests import Request

from app.auth import get_current_user
from app.errors import UnauthorizedError


def _request(headers: dict | None = None, state: dict | None = None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/collections/",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "state": state or {},
    }
    return Request(scope)


@pytest.mark.asyncio
async def test_identity_from_header():
    user = await get_current_user(_request(headers={"X-User-Id": "user-1"}))
    assert user.id == "user-1"


@pytest.mark.asyncio
@pytest.mark.parametrize("state_user", [{"id": "user-2"}, SimpleNamespace(id="user-2")])
async def test_identity_from_request_state(state_user):
    request = _request(headers={"X-User-Id": "ignored"}, state={"user": state_user})
    user = await get_current_user(request)
    assert user.id == "user-2"


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [None, {"X-User-Id": "   "}])
async def test_missing_identity_is_unauthorized(headers):
    with pytest.raises(UnauthorizedError):
        await get_current_user(_request(headers=headers))


@pytest.mark.asyncio
async def test_unauthorized_envelope(client: AsyncClient):
    resp = await client.get("/api/templates/")
    assert resp.status_code == 401
    assert resp.json() == {
        "success": False,
        "error": {
            "code": "UNAUTHORIZED",
            "message": "You must be signed in to perform this action.",
        },
    }


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
