"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* se sincroniza con el LMS, no *cómo* se envía.
- Ninguna entidad sobrevive a una invocación de comando.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.category import Category

MAX_NAME_LENGTH = 70


class RawEntry(BaseModel):
    """Una línea (o un link de una línea multi-link) tal como sale del parser."""

    model_config = ConfigDict(frozen=True)

    category: Category = Field(
        ...,
        description="Mitad del input de la que proviene el registro.",
    )
    title: str = Field(
        ...,
        description="Título crudo, antes de normalizar.",
    )
    link: str = Field(
        ...,
        min_length=1,
        description="Link de la grabación, copiado tal cual.",
    )
    position: int | None = Field(
        default=None,
        ge=0,
        description="Posición (base 0) del link si la línea tenía varios; None si tenía uno.",
    )


class Lesson(BaseModel):
    """Unidad canónica que se envía al LMS."""

    name: str = Field(
        ...,
        max_length=MAX_NAME_LENGTH,
        description="Nombre visible, como mucho 70 caracteres.",
    )
    link: str = Field(
        ...,
        description="Link de la grabación.",
    )


class RemoteMaterial(BaseModel):
    """Material adicional tal como lo lista el LMS."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(
        ...,
        description="Identificador opaco del material en el LMS.",
    )
    name: str = Field(
        default="",
        description="Nombre visible del material.",
    )


class CredentialPair(BaseModel):
    """Par de tokens devuelto por login/refresh.

    `refresh_token` es durable (se persiste siempre); `access_token` solo vive
    durante una sesión de llamadas.
    """

    refresh_token: str = Field(..., min_length=1)
    access_token: str | None = Field(default=None)
