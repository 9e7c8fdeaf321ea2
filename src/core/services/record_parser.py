"""Parser del input de lecciones.

Formato:
- Dos segmentos separados por la primera línea en blanco: tech skills arriba,
  soft skills abajo (si no hay línea en blanco, todo es tech skills).
- Cada línea es `título<TAB>link`; el campo de link puede traer varios links
  separados por espacios.
- Una línea que empieza con TAB continúa el campo de link de la anterior.
- Líneas sin TAB o con link vacío se ignoran (comentarios/separadores).
"""

from __future__ import annotations

from typing import Iterator

from core.domain.category import Category
from core.domain.models import RawEntry
from core.logging_utils import get_logger

log = get_logger(__name__)


def normalize_input(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n\t", " ")


def split_segments(text: str) -> tuple[str, str]:
    """Separa el texto en (tech, soft) por la primera línea en blanco."""

    tech, sep, soft = text.partition("\n\n")
    if not sep:
        return text, ""
    return tech, soft


def _split_line(line: str) -> tuple[str, str] | None:
    title, sep, link_field = line.partition("\t")
    if not sep or not link_field:
        return None
    return title, link_field


def _entries_for_line(category: Category, line: str) -> Iterator[RawEntry]:
    parts = _split_line(line)
    if parts is None:
        return
    title, link_field = parts

    if " " not in link_field:
        yield RawEntry(category=category, title=title, link=link_field)
        return

    links = [token for token in link_field.split(" ") if token]
    for position, link in enumerate(links):
        yield RawEntry(category=category, title=title, link=link, position=position)


def parse_records(text: str) -> list[RawEntry]:
    """Convierte el input crudo en RawEntry: primero tech skills, luego soft skills."""

    tech, soft = split_segments(normalize_input(text))

    entries: list[RawEntry] = []
    for category, segment in zip(Category.ordered(), (tech, soft)):
        before = len(entries)
        for line in segment.split("\n"):
            if not line:
                continue
            entries.extend(_entries_for_line(category, line))
        log.debug("Parsed %d %s entries", len(entries) - before, category.value)
    return entries
