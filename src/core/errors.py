"""Errores del Core.

Cada error lleva un mensaje legible que la CLI muestra tal cual antes de
terminar con estado de fallo. No hay reintentos: el primer error aborta el
comando en curso.
"""

from __future__ import annotations

SERVICE_NAME = "GoITeens LMS"


class LMSRecordsError(Exception):
    """Base de todos los errores que la CLI reporta al usuario."""


class MissingCredential(LMSRecordsError):
    """No hay refresh token guardado."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Could not find {location}. Log in first")


class TransportError(LMSRecordsError):
    """Fallo de red, timeout o estado HTTP no exitoso."""


class RemoteRejected(LMSRecordsError):
    """El servicio respondió con `success=false`."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{SERVICE_NAME} returned an error: {message}")


class InvalidResponse(LMSRecordsError):
    """La respuesta no tiene la forma esperada."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = f"{SERVICE_NAME} returned an invalid response"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class UploadFailed(LMSRecordsError):
    """El LMS rechazó la creación de una lección concreta."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        super().__init__(
            f'When uploading lesson "{name}" {SERVICE_NAME} returned an error: {message}'
        )


class RemoveFailed(LMSRecordsError):
    """El LMS rechazó el borrado de un material concreto."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        super().__init__(
            f'When removing lesson "{name}" {SERVICE_NAME} returned an error: {message}'
        )


class CredentialStoreError(LMSRecordsError):
    """No se pudo leer o escribir el refresh token guardado."""

    def __init__(self, action: str, location: str, reason: str) -> None:
        self.location = location
        super().__init__(f"Could not {action} {location}: {reason}")
