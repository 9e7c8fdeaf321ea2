"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from adapters.token_store import FileTokenStore
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import CredentialStoreError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Any HTTP answer from the API host counts as reachable."""

    try:
        with build_client(settings) as client:
            response = client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _settings(ctx: typer.Context) -> AppSettings:
    state = ctx.obj
    return state.settings if state is not None else AppSettings()


@app.command()
def run(
    ctx: typer.Context,
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = _settings(ctx)

    table = Table(title="lms-records Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    has_login = bool(settings.username and settings.password)
    table.add_row(
        "Credentials",
        "OK" if has_login else "OPTIONAL",
        "LMS_USERNAME/LMS_PASSWORD set" if has_login else "Only needed for `login-env`",
    )
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Module id", "OK", str(settings.module_id))

    try:
        token_ok = FileTokenStore(settings.token_file).load() is not None
        token_detail = str(settings.token_file) if token_ok else "Run `login` or `login-env` first"
        token_status = "OK" if token_ok else "MISSING"
    except CredentialStoreError as exc:
        token_status, token_detail = "FAIL", str(exc)
    table.add_row("Refresh token", token_status, token_detail)

    input_ok = settings.input_file.is_file()
    table.add_row(
        "Input file",
        "OK" if input_ok else "MISSING",
        str(settings.input_file),
    )

    ok_http = True
    if not offline:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] The LMS API is unreachable; every command except `preview` will fail."
        )


@app.command(name="setup-credentials")
def setup_credentials() -> None:
    """Interactive setup (stores LMS_USERNAME/LMS_PASSWORD in the user config .env)."""

    username = typer.prompt("LMS username (email)").strip()
    password = typer.prompt("LMS password", hide_input=True, confirmation_prompt=False).strip()

    if not username or not password:
        raise typer.BadParameter("username and password are required")

    env_path = write_user_env_vars(
        {
            "LMS_USERNAME": username,
            "LMS_PASSWORD": password,
        },
        get_user_env_file(),
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
