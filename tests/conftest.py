"""Shared fakes for the LMS client and the credential store."""

from __future__ import annotations

import os

import pytest

from core.domain.models import CredentialPair, RemoteMaterial
from core.errors import RemoteRejected


class FakeLMS:
    """In-memory stand-in for GoITeensClient that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.materials: list[RemoteMaterial] = []
        self.create_errors: dict[str, str] = {}
        self.delete_errors: dict[int, str] = {}
        self.login_error: str | None = None
        self.refresh_error: str | None = None
        self._rotation = 0
        self.closed = False

    def login(self, username, password):
        self.calls.append(("login", username))
        if self.login_error:
            raise RemoteRejected(self.login_error)
        return CredentialPair(refresh_token="refresh-login", access_token="access-login")

    def refresh(self, refresh_token):
        self.calls.append(("refresh", refresh_token))
        if self.refresh_error:
            raise RemoteRejected(self.refresh_error)
        self._rotation += 1
        return CredentialPair(
            refresh_token=f"refresh-{self._rotation}",
            access_token=f"access-{self._rotation}",
        )

    def create_material(self, access_token, *, delivery_type, module_id, group_id, name, link):
        self.calls.append(("create", name, delivery_type, group_id, access_token))
        if name in self.create_errors:
            raise RemoteRejected(self.create_errors[name])

    def list_materials(self, access_token, *, module_id, group_id):
        self.calls.append(("list", module_id, group_id, access_token))
        return list(self.materials)

    def delete_material(self, access_token, *, material_id):
        self.calls.append(("delete", material_id, access_token))
        if material_id in self.delete_errors:
            raise RemoteRejected(self.delete_errors[material_id])

    def close(self):
        self.closed = True

    def names(self, kind: str) -> list:
        return [call[1] for call in self.calls if call[0] == kind]


class MemoryStore:
    def __init__(self, token: str | None = None) -> None:
        self.token = token
        self.saves: list[str] = []

    def load(self):
        return self.token

    def save(self, token):
        self.saves.append(token)
        self.token = token

    def describe(self):
        return "memory store"


@pytest.fixture(autouse=True)
def _clean_lms_env(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("LMS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake_lms() -> FakeLMS:
    return FakeLMS()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore(token="refresh-0")
