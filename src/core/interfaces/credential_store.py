"""Contrato del almacén de credenciales.

Un único slot: guarda como mucho un refresh token a la vez, sin historial
ni multi-cuenta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):
    """Almacén clave-valor de un solo valor opaco."""

    def load(self) -> str | None:
        """Devuelve el token guardado, o None si no hay ninguno."""

        ...

    def save(self, token: str) -> None:
        """Sobrescribe el token guardado."""

        ...

    def describe(self) -> str:
        """Descripción legible del almacén (para mensajes de error)."""

        ...
