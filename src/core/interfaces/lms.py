"""Contrato del cliente del LMS.

Reglas de diseño:
- Llamadas síncronas: una sola request en vuelo a la vez.
- Los métodos devuelven el resultado ya validado o lanzan un error de
  `core.errors`; `success=false` se reporta como `RemoteRejected`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CredentialPair, RemoteMaterial


@runtime_checkable
class LMSApi(Protocol):
    """Operaciones remotas que usa el Core."""

    def login(self, username: str, password: str) -> CredentialPair:
        """POST /auth/login."""

        ...

    def refresh(self, refresh_token: str) -> CredentialPair:
        """POST /auth/refresh con el refresh token como cookie."""

        ...

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
        """Crea un material adicional para el grupo."""

        ...

    def list_materials(
        self,
        access_token: str,
        *,
        module_id: int,
        group_id: int,
    ) -> list[RemoteMaterial]:
        """Lista los materiales adicionales del grupo."""

        ...

    def delete_material(self, access_token: str, *, material_id: int) -> None:
        """Borra un material por su id."""

        ...

    def close(self) -> None:
        """Libera la conexión HTTP."""

        ...
