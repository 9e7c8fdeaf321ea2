"""Modelos de las respuestas JSON del LMS.

Todas las respuestas traen `success` y `error`; el resto de campos depende
del endpoint y solo se exige cuando `success` es true.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import RemoteMaterial


class GenericResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    error: str = Field(default="")


class TokenResponse(GenericResponse):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    refresh_token: str | None = Field(default=None, alias="refreshToken")
    access_token: str | None = Field(default=None, alias="accessToken")


class MaterialListResponse(GenericResponse):
    group: list[RemoteMaterial] | None = Field(
        default=None,
        description="Materiales del grupo; ausente si la respuesta es inválida.",
    )
