"""Categorías de lecciones.

La categoría indica de qué mitad del input viene un registro (tech o soft
skills) y define el prefijo que se antepone al nombre visible.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Categoría de un registro de lección."""

    TECH_SKILLS = "tech_skills"
    SOFT_SKILLS = "soft_skills"

    @classmethod
    def ordered(cls) -> tuple["Category", ...]:
        """Orden en el que aparecen los segmentos del input."""

        return (cls.TECH_SKILLS, cls.SOFT_SKILLS)

    def prefix(self) -> str:
        """Prefijo visible en el LMS ("Tech skills" / "Soft skills")."""

        return "Tech skills" if self is Category.TECH_SKILLS else "Soft skills"

    def markers(self) -> tuple[str, str]:
        """Formas en minúsculas con las que el prefijo puede venir embebido en un título."""

        lowered = self.prefix().lower()
        return (lowered, lowered.replace(" ", "_"))


def known_markers() -> tuple[str, ...]:
    return tuple(marker for category in Category.ordered() for marker in category.markers())
