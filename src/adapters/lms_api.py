"""Cliente HTTP de la API de administración de GoITeens LMS.

Implementa `core.interfaces.LMSApi`:
- Errores de red, timeouts y estados HTTP no exitosos -> `TransportError`.
- Cuerpos no JSON o con forma inesperada -> `InvalidResponse`.
- `success=false` -> `RemoteRejected` con el texto de error del LMS.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from adapters.lms_models import GenericResponse, MaterialListResponse, TokenResponse
from core.config import AppSettings
from core.domain.models import CredentialPair, RemoteMaterial
from core.errors import InvalidResponse, RemoteRejected, TransportError
from core.logging_utils import get_logger

log = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=GenericResponse)

LOGIN_PATH = "auth/login"
REFRESH_PATH = "auth/refresh"
MATERIALS_PATH = "training-module/additional-material"


class GoITeensClient:
    """Cliente síncrono: una request en vuelo a la vez, sin reintentos."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_client(self._settings)

    def __enter__(self) -> "GoITeensClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _send(
        self,
        method: str,
        path: str,
        model: type[ResponseT],
        **kwargs: Any,
    ) -> ResponseT:
        log.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error while calling {path}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponse(f"{path} did not return JSON") from exc

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise InvalidResponse(f"unexpected {path} payload: {exc.error_count()} errors") from exc

    @staticmethod
    def _bearer(access_token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    @staticmethod
    def _ensure_success(res: GenericResponse) -> None:
        if not res.success:
            raise RemoteRejected(res.error)

    def _credentials(self, res: TokenResponse) -> CredentialPair:
        self._ensure_success(res)
        if not res.refresh_token:
            raise InvalidResponse("no refreshToken in token response")
        return CredentialPair(refresh_token=res.refresh_token, access_token=res.access_token)

    def login(self, username: str, password: str) -> CredentialPair:
        res = self._send(
            "POST",
            LOGIN_PATH,
            TokenResponse,
            json={
                "username": username,
                "password": password,
                "url": self._settings.login_page_url,
            },
            timeout=self._settings.login_timeout_seconds,
        )
        return self._credentials(res)

    def refresh(self, refresh_token: str) -> CredentialPair:
        res = self._send(
            "POST",
            REFRESH_PATH,
            TokenResponse,
            headers={"Cookie": f"refreshToken={refresh_token}"},
        )
        return self._credentials(res)

    def create_material(
        self,
        access_token: str,
        *,
        delivery_type: str,
        module_id: int,
        group_id: int,
        name: str,
        link: str,
    ) -> None:
        res = self._send(
            "POST",
            f"{MATERIALS_PATH}/create",
            GenericResponse,
            headers=self._bearer(access_token),
            json={
                "category": "group",
                "type": delivery_type,
                "moduleId": module_id,
                "groupId": group_id,
                "name": name,
                "link": link,
            },
        )
        self._ensure_success(res)

    def list_materials(
        self,
        access_token: str,
        *,
        module_id: int,
        group_id: int,
    ) -> list[RemoteMaterial]:
        res = self._send(
            "GET",
            f"{MATERIALS_PATH}/list",
            MaterialListResponse,
            headers=self._bearer(access_token),
            params={"moduleId": module_id, "groupId": group_id},
        )
        self._ensure_success(res)
        if res.group is None:
            raise InvalidResponse("no group field in material list")
        return res.group

    def delete_material(self, access_token: str, *, material_id: int) -> None:
        res = self._send(
            "POST",
            f"{MATERIALS_PATH}/delete",
            GenericResponse,
            headers=self._bearer(access_token),
            json={"materialId": material_id},
        )
        self._ensure_success(res)
