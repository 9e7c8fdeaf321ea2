"""CLI principal (Typer).

Los comandos solo arman dependencias, leen el input y presentan resultados;
toda la lógica vive en `core.services`.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import typer
from rich.console import Console

from adapters.lms_api import GoITeensClient
from adapters.token_store import FileTokenStore
from cli import doctor
from cli.ui_components import (
    build_lessons_table,
    build_materials_table,
    print_error,
    print_line,
)
from core import __version__
from core.config import AppSettings
from core.domain.models import Lesson, RemoteMaterial
from core.errors import LMSRecordsError
from core.interfaces.lms import LMSApi
from core.logging_utils import setup_logging
from core.services.session import SessionManager
from core.services.sync_pipeline import SyncHooks, SyncOrchestrator, prepare_lessons

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Uploads lesson records to GoITeens LMS.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

GROUP_ID_HELP = (
    "Id of the affected group. Can be obtained by copying it from the group's URL "
    "(it's the first number)."
)


@dataclass
class CliState:
    settings: AppSettings
    quiet: bool = False


def build_api(settings: AppSettings) -> LMSApi:
    return GoITeensClient(settings)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _fail(message: str) -> typer.Exit:
    print_error(_err_console, message)
    return typer.Exit(code=1)


@contextmanager
def _lms(state: CliState) -> Iterator[tuple[LMSApi, SessionManager]]:
    """Cliente del LMS + sesión; traduce errores del Core a un mensaje y exit 1."""

    api = build_api(state.settings)
    session = SessionManager(api, FileTokenStore(state.settings.token_file))
    try:
        yield api, session
    except LMSRecordsError as exc:
        raise _fail(str(exc)) from exc
    finally:
        api.close()


def _orchestrator(state: CliState, api: LMSApi, session: SessionManager) -> SyncOrchestrator:
    def uploaded(lesson: Lesson) -> None:
        print_line(_console, f'Successfully uploaded lesson "{lesson.name}"')

    def removed(material: RemoteMaterial) -> None:
        print_line(_console, f"Successfully removed lesson {material.name}")

    return SyncOrchestrator(
        api=api,
        session=session,
        module_id=state.settings.module_id,
        quiet=state.quiet,
        hooks=SyncHooks(uploaded=uploaded, removed=removed),
    )


def _read_input(state: CliState, path: Path | None) -> str:
    input_path = path or state.settings.input_file
    if not input_path.is_file():
        raise _fail(f"{input_path} file not found")
    try:
        return input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise _fail(f"{input_path} is not valid UTF-8") from exc
    except OSError as exc:
        raise _fail(f"Could not read {input_path}: {exc}") from exc


def _log_in(state: CliState, username: str, password: str) -> None:
    if not state.quiet:
        print_line(_console, "Logging in... It's going to take a long time")

    with _lms(state) as (_, session):
        session.login(username, password)

    if not state.quiet:
        token_file = state.settings.token_file
        print_line(
            _console,
            f"Successfully logged in! A file named {token_file} should appear.",
        )
        print_line(_console, "This file is necessary for all other commands to work")


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"lms-records {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Quiet mode. Don't print successful actions."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level, console=_err_console)
    ctx.obj = CliState(settings=settings, quiet=quiet)


@app.command()
def login(
    ctx: typer.Context,
    username: str = typer.Argument(..., help="GoITeens LMS admin panel username (email)."),
    password: str = typer.Argument(..., help="GoITeens LMS admin panel password."),
) -> None:
    """Log in to GoITeens admin panel, creating the refresh token file."""

    _log_in(_state(ctx), username, password)


@app.command(name="login-env")
def login_env(ctx: typer.Context) -> None:
    """Log in using LMS_USERNAME and LMS_PASSWORD (.env supported)."""

    state = _state(ctx)
    if not state.settings.username:
        raise _fail("No LMS_USERNAME environment variable found")
    if not state.settings.password:
        raise _fail("No LMS_PASSWORD environment variable found")
    _log_in(state, state.settings.username, state.settings.password)


@app.command()
def upload(
    ctx: typer.Context,
    group_id: int = typer.Argument(..., min=0, help=GROUP_ID_HELP),
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Lessons file (defaults to input.txt)."
    ),
) -> None:
    """Upload records into the LMS for a group from the input file.

    The input has tech skills and soft skills lessons separated by a blank line.
    Each lesson is a tab-separated line with the lesson's name and a link to its record.
    """

    state = _state(ctx)
    text = _read_input(state, input_path)
    with _lms(state) as (api, session):
        _orchestrator(state, api, session).upload(group_id, text)


@app.command()
def remove(
    ctx: typer.Context,
    group_id: int = typer.Argument(..., min=0, help=GROUP_ID_HELP),
) -> None:
    """Remove all lesson records for a group."""

    state = _state(ctx)
    with _lms(state) as (api, session):
        _orchestrator(state, api, session).remove(group_id)


@app.command(name="list")
def list_materials(
    ctx: typer.Context,
    group_id: int = typer.Argument(..., min=0, help=GROUP_ID_HELP),
) -> None:
    """Show the lesson records currently stored for a group."""

    state = _state(ctx)
    with _lms(state) as (api, session):
        materials = _orchestrator(state, api, session).list_materials(group_id)
    _console.print(build_materials_table(group_id, materials))


@app.command()
def preview(
    ctx: typer.Context,
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Lessons file (defaults to input.txt)."
    ),
) -> None:
    """Show the lessons that `upload` would create, without calling the LMS."""

    state = _state(ctx)
    lessons = prepare_lessons(_read_input(state, input_path))
    _console.print(build_lessons_table(lessons))


def run() -> None:
    app()
