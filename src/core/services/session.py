"""Gestión de sesión contra el LMS.

Reglas:
- El refresh token se lee una vez al inicio y se sobrescribe en cada login o
  refresh exitoso (el LMS lo rota; reutilizar uno viejo falla).
- El access token nunca se persiste.
"""

from __future__ import annotations

from core.errors import InvalidResponse, MissingCredential
from core.interfaces.credential_store import CredentialStore
from core.interfaces.lms import LMSApi
from core.logging_utils import get_logger, redact_token

log = get_logger(__name__)


class SessionManager:
    """Intercambia el refresh token durable por un access token de corta vida."""

    def __init__(self, api: LMSApi, store: CredentialStore) -> None:
        self._api = api
        self._store = store

    def login(self, username: str, password: str) -> str:
        """Hace login con usuario/contraseña y guarda el refresh token emitido."""

        log.debug("Logging in as %s", username)
        pair = self._api.login(username, password)
        self._store.save(pair.refresh_token)
        log.debug("Stored refresh token %s", redact_token(pair.refresh_token))
        return pair.refresh_token

    def load_refresh_token(self) -> str:
        token = self._store.load()
        if not token:
            raise MissingCredential(self._store.describe())
        return token

    def refresh(self, refresh_token: str) -> str:
        """Rota el refresh token y devuelve el nuevo access token."""

        pair = self._api.refresh(refresh_token)
        if not pair.access_token:
            raise InvalidResponse("refresh response has no accessToken")
        self._store.save(pair.refresh_token)
        log.debug(
            "Rotated refresh token %s -> %s",
            redact_token(refresh_token),
            redact_token(pair.refresh_token),
        )
        return pair.access_token

    def open(self) -> str:
        """Carga el refresh token guardado y devuelve un access token listo para usar."""

        return self.refresh(self.load_refresh_token())
