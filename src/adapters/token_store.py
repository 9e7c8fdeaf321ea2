"""Almacén de refresh token en un archivo de texto."""

from __future__ import annotations

from pathlib import Path

from core.errors import CredentialStoreError


class FileTokenStore:
    """Implementa `core.interfaces.CredentialStore` sobre un único archivo."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        if not self._path.is_file():
            return None
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise CredentialStoreError("read", str(self._path), str(exc)) from exc
        return token or None

    def save(self, token: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(token, encoding="utf-8")
        except OSError as exc:
            raise CredentialStoreError("write", str(self._path), str(exc)) from exc

    def describe(self) -> str:
        return f"{self._path.name} file"
