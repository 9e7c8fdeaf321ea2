"""Nombres visibles de las lecciones.

El LMS muestra como mucho 70 caracteres. Todas las longitudes aquí son en
caracteres (code points), nunca en bytes.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.category import Category, known_markers
from core.domain.models import MAX_NAME_LENGTH, Lesson, RawEntry

VIDEO_MARKER = "youtu"


def truncate_chars(text: str, max_chars: int) -> str:
    """Corta `text` a `max_chars` caracteres como mucho."""

    return text[: max(0, max_chars)]


def _has_category_prefix(title: str) -> bool:
    lowered = title.lower()
    return any(marker in lowered for marker in known_markers())


def normalize_name(category: Category, title: str, position: int | None = None) -> str:
    """Nombre canónico para (categoría, título, posición base 0)."""

    suffix = "" if position is None else f" ({position + 1})"
    base = title if _has_category_prefix(title) else f"{category.prefix()} {title}"
    return truncate_chars(base, MAX_NAME_LENGTH - len(suffix)) + suffix


def lesson_from_entry(entry: RawEntry) -> Lesson:
    return Lesson(
        name=normalize_name(entry.category, entry.title, entry.position),
        link=entry.link,
    )


def resolve_duplicates(lessons: Iterable[Lesson]) -> list[Lesson]:
    """Añade " (n)" a cada nombre repetido a partir de su segunda aparición.

    El marcador se calcula sobre el nombre ya normalizado, que se vuelve a
    truncar para que el resultado siga entrando en 70 caracteres. Si ese
    recorte hace coincidir dos nombres distintos, la colisión no se detecta.
    """

    counts: dict[str, int] = {}
    resolved: list[Lesson] = []
    for lesson in lessons:
        count = counts.get(lesson.name, 0) + 1
        counts[lesson.name] = count
        if count < 2:
            resolved.append(lesson)
            continue
        marker = f" ({count})"
        name = truncate_chars(lesson.name, MAX_NAME_LENGTH - len(marker)) + marker
        resolved.append(lesson.model_copy(update={"name": name}))
    return resolved


def build_lessons(entries: Iterable[RawEntry]) -> list[Lesson]:
    """Normaliza cada entrada y resuelve duplicados sobre la lista completa."""

    return resolve_duplicates(lesson_from_entry(entry) for entry in entries)


def classify_delivery(link: str) -> str:
    """Tipo de material para el LMS: "video" para YouTube, "other" para el resto."""

    return "video" if VIDEO_MARKER in link else "other"
