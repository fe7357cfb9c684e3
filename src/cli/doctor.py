"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="nico-mylist Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "MISSING", str(env_file))
    if settings.session_credential() is not None:
        table.add_row("Session cookies", "OK", "user_session + user_session_secure set")
    else:
        table.add_row("Session cookies", "FAIL", "Run `nico-mylist login`")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("X-Frontend-Id", "OK", settings.frontend_id)

    # Connectivity (best-effort): cualquier status HTTP cuenta como alcanzable.
    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if settings.session_credential() is None:
        _console.print(
            "\n[yellow]Note:[/yellow] Every mylist endpoint needs a logged-in session."
        )
