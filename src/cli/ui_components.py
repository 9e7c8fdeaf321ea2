"""Componentes de UI para CLI (Rich).

- Evita mezclar lógica de comandos con detalles visuales.
- Las tablas se reutilizan en `preview` y `list`.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from core.domain.models import Lesson, RemoteMaterial
from core.services.naming import classify_delivery


def build_lessons_table(lessons: list[Lesson]) -> Table:
    """Tabla con las lecciones tal como se subirían."""

    table = Table(title=f"Lessons ({len(lessons)})")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green", no_wrap=True)
    table.add_column("Link", style="magenta")
    for index, lesson in enumerate(lessons, start=1):
        table.add_row(
            str(index),
            Text(lesson.name),
            classify_delivery(lesson.link),
            Text(lesson.link),
        )
    return table


def build_materials_table(group_id: int, materials: list[RemoteMaterial]) -> Table:
    """Tabla con los materiales adicionales de un grupo."""

    table = Table(title=f"Group {group_id}: {len(materials)} materials")
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    for material in materials:
        table.add_row(str(material.id), Text(material.name))
    return table


def print_line(console: Console, message: str) -> None:
    """Línea de progreso sin markup ni cortes de línea."""

    console.print(escape(message), highlight=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )
