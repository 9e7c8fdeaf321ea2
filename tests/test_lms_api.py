"""Tests for the GoITeens HTTP client against httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.http_client import build_client
from adapters.lms_api import GoITeensClient
from core.config import AppSettings
from core.errors import InvalidResponse, RemoteRejected, TransportError


def _client(handler) -> tuple[GoITeensClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    settings = AppSettings(_env_file=None)
    http = build_client(settings, transport=httpx.MockTransport(recording))
    return GoITeensClient(settings, client=http), seen


def test_login_posts_credentials_and_login_page():
    client, seen = _client(
        lambda request: httpx.Response(
            200,
            json={"success": True, "error": "ok", "refreshToken": "r1", "accessToken": "a1"},
        )
    )

    pair = client.login("teacher@example.com", "secret")

    assert pair.refresh_token == "r1"
    assert pair.access_token == "a1"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/v1/auth/login"
    assert json.loads(request.content) == {
        "username": "teacher@example.com",
        "password": "secret",
        "url": "https://admin.edu.goiteens.com/account/login",
    }


def test_login_rejection_carries_service_message():
    client, _ = _client(
        lambda request: httpx.Response(200, json={"success": False, "error": "Invalid credentials"})
    )

    with pytest.raises(RemoteRejected) as excinfo:
        client.login("teacher@example.com", "bad")
    assert excinfo.value.message == "Invalid credentials"


def test_refresh_sends_token_as_cookie():
    client, seen = _client(
        lambda request: httpx.Response(
            200,
            json={"success": True, "error": "ok", "refreshToken": "r2", "accessToken": "a2"},
        )
    )

    pair = client.refresh("r1")

    assert pair.refresh_token == "r2"
    assert seen[0].url.path == "/api/v1/auth/refresh"
    assert seen[0].headers["Cookie"] == "refreshToken=r1"


def test_refresh_success_without_token_is_invalid():
    client, _ = _client(lambda request: httpx.Response(200, json={"success": True, "error": "ok"}))

    with pytest.raises(InvalidResponse):
        client.refresh("r1")


def test_create_material_payload_and_bearer():
    client, seen = _client(lambda request: httpx.Response(200, json={"success": True, "error": "ok"}))

    client.create_material(
        "a1",
        delivery_type="video",
        module_id=17063573,
        group_id=42,
        name="Tech skills Intro",
        link="https://youtu.be/x",
    )

    request = seen[0]
    assert request.url.path == "/api/v1/training-module/additional-material/create"
    assert request.headers["Authorization"] == "Bearer a1"
    assert json.loads(request.content) == {
        "category": "group",
        "type": "video",
        "moduleId": 17063573,
        "groupId": 42,
        "name": "Tech skills Intro",
        "link": "https://youtu.be/x",
    }


def test_create_material_rejection():
    client, _ = _client(
        lambda request: httpx.Response(200, json={"success": False, "error": "Duplicate"})
    )

    with pytest.raises(RemoteRejected, match="Duplicate"):
        client.create_material(
            "a1", delivery_type="other", module_id=1, group_id=2, name="n", link="l"
        )


def test_list_materials_parses_group():
    client, seen = _client(
        lambda request: httpx.Response(
            200,
            json={
                "success": True,
                "error": "ok",
                "group": [{"id": 7, "name": "Tech skills Intro", "link": "x"}, {"id": 8, "name": "B"}],
            },
        )
    )

    materials = client.list_materials("a1", module_id=17063573, group_id=42)

    assert [(m.id, m.name) for m in materials] == [(7, "Tech skills Intro"), (8, "B")]
    request = seen[0]
    assert request.method == "GET"
    assert request.url.params["moduleId"] == "17063573"
    assert request.url.params["groupId"] == "42"


def test_list_materials_without_group_is_invalid():
    client, _ = _client(lambda request: httpx.Response(200, json={"success": True, "error": "ok"}))

    with pytest.raises(InvalidResponse):
        client.list_materials("a1", module_id=1, group_id=2)


def test_list_materials_rejection_wins_over_missing_group():
    client, _ = _client(
        lambda request: httpx.Response(200, json={"success": False, "error": "No access"})
    )

    with pytest.raises(RemoteRejected, match="No access"):
        client.list_materials("a1", module_id=1, group_id=2)


def test_delete_material_sends_id():
    client, seen = _client(lambda request: httpx.Response(200, json={"success": True, "error": "ok"}))

    client.delete_material("a1", material_id=7)

    assert seen[0].url.path == "/api/v1/training-module/additional-material/delete"
    assert json.loads(seen[0].content) == {"materialId": 7}


def test_http_error_status_is_transport_error():
    client, _ = _client(lambda request: httpx.Response(502, text="Bad gateway"))

    with pytest.raises(TransportError):
        client.delete_material("a1", material_id=7)


def test_connection_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = _client(handler)

    with pytest.raises(TransportError):
        client.refresh("r1")


def test_non_json_body_is_invalid_response():
    client, _ = _client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(InvalidResponse):
        client.delete_material("a1", material_id=7)


def test_body_without_success_flag_is_invalid_response():
    client, _ = _client(lambda request: httpx.Response(200, json={"status": "ok"}))

    with pytest.raises(InvalidResponse):
        client.delete_material("a1", material_id=7)
