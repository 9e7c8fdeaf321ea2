"""Orquestación de upload/remove contra el LMS.

Los comandos son secuenciales y terminan en el primer error: lo ya creado o
borrado en el LMS no se deshace, y lo que falta no se intenta. Los efectos
visibles (líneas de progreso) salen por hooks para mantener el Core libre de
la CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from core.domain.models import Lesson, RemoteMaterial
from core.errors import RemoteRejected, RemoveFailed, UploadFailed
from core.interfaces.lms import LMSApi
from core.logging_utils import get_logger
from core.services.naming import build_lessons, classify_delivery
from core.services.record_parser import parse_records
from core.services.session import SessionManager

log = get_logger(__name__)


@dataclass
class SyncHooks:
    """Callbacks opcionales para la capa de UI."""

    uploaded: Callable[[Lesson], None] | None = None
    removed: Callable[[RemoteMaterial], None] | None = None


@dataclass
class SyncResult:
    """Resultado de un comando completado sin errores."""

    group_id: int
    uploaded: list[Lesson] = field(default_factory=list)
    removed: list[RemoteMaterial] = field(default_factory=list)


def prepare_lessons(text: str) -> list[Lesson]:
    """Input crudo -> lecciones con nombre final (parser + normalizer + duplicados)."""

    return build_lessons(parse_records(text))


class SyncOrchestrator:
    """Ejecuta los flujos Upload y Remove para un grupo."""

    def __init__(
        self,
        *,
        api: LMSApi,
        session: SessionManager,
        module_id: int,
        quiet: bool = False,
        hooks: SyncHooks | None = None,
    ) -> None:
        self._api = api
        self._session = session
        self._module_id = module_id
        self._quiet = quiet
        self._hooks = hooks or SyncHooks()

    def upload(self, group_id: int, text: str) -> SyncResult:
        access_token = self._session.open()
        lessons = prepare_lessons(text)
        log.debug("Uploading %d lessons to group %s", len(lessons), group_id)

        result = SyncResult(group_id=group_id)
        for lesson in lessons:
            try:
                self._api.create_material(
                    access_token,
                    delivery_type=classify_delivery(lesson.link),
                    module_id=self._module_id,
                    group_id=group_id,
                    name=lesson.name,
                    link=lesson.link,
                )
            except RemoteRejected as exc:
                raise UploadFailed(lesson.name, exc.message) from exc
            result.uploaded.append(lesson)
            if not self._quiet and self._hooks.uploaded:
                self._hooks.uploaded(lesson)
        return result

    def list_materials(self, group_id: int) -> list[RemoteMaterial]:
        access_token = self._session.open()
        return self._api.list_materials(
            access_token,
            module_id=self._module_id,
            group_id=group_id,
        )

    def remove(self, group_id: int) -> SyncResult:
        access_token = self._session.open()
        materials = self._api.list_materials(
            access_token,
            module_id=self._module_id,
            group_id=group_id,
        )
        log.debug("Removing %d materials from group %s", len(materials), group_id)

        result = SyncResult(group_id=group_id)
        for material in materials:
            try:
                self._api.delete_material(access_token, material_id=material.id)
            except RemoteRejected as exc:
                raise RemoveFailed(material.name, exc.message) from exc
            result.removed.append(material)
            if not self._quiet and self._hooks.removed:
                self._hooks.removed(material)
        return result
