"""CLI principal (Typer + Rich).

Por qué Typer:
- Comandos tipados con validación de opciones sin boilerplate.
- La lógica vive en `core`/`adapters`; aquí solo hay I/O de consola.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console

from adapters.json_exporter import export_result_json
from adapters.nicovideo import NicoMylistClient
from cli.doctor import app as doctor_app
from cli.ui_components import build_items_table, build_mylist_panel, build_mylists_table, print_banner
from core.config import AppSettings, write_user_env_vars
from core.domain.models import SessionCredential
from core.errors import NicoApiError, NicoDecodeError, NicoStatusError
from core.logging_config import setup_logging
from core.services.mylist_pipeline import PaginationHooks

app = typer.Typer(no_args_is_help=True, help="Read niconico mylists from the command line.")
app.add_typer(doctor_app, name="doctor")

_console = Console()

R = TypeVar("R")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (requests, statuses)."),
) -> None:
    setup_logging(AppSettings(), level="DEBUG" if verbose else None)


def _build_client(settings: AppSettings) -> NicoMylistClient:
    return NicoMylistClient(settings)


def _require_session(settings: AppSettings) -> SessionCredential:
    session = settings.session_credential()
    if session is None:
        _console.print(
            "[red]No session configured.[/red] Run `nico-mylist login` or set "
            "NICO_MYLIST_USER_SESSION / NICO_MYLIST_USER_SESSION_SECURE."
        )
        raise typer.Exit(code=1)
    return session


def _run(coro: Coroutine[Any, Any, R]) -> R:
    try:
        return asyncio.run(coro)
    except NicoStatusError as exc:
        code = f" {exc.error_code}" if exc.error_code else ""
        _console.print(f"[red]API error:[/red] HTTP {exc.status}{code}")
    except NicoDecodeError as exc:
        _console.print(f"[red]Unexpected API response:[/red] {exc}")
    except NicoApiError as exc:
        _console.print(f"[red]Request failed:[/red] {exc}")
    raise typer.Exit(code=1)


@app.command()
def mylists(
    sample_items: int | None = typer.Option(
        None,
        "--sample-items",
        min=0,
        help="Sample items per mylist (default: NICO_MYLIST_SAMPLE_ITEM_COUNT).",
    ),
    json_path: Path | None = typer.Option(None, "--json", help="Also write the raw response as JSON."),
) -> None:
    """List the mylists of the logged-in user."""

    settings = AppSettings()
    session = _require_session(settings)
    count = settings.sample_item_count if sample_items is None else sample_items

    result = _run(_build_client(settings).fetch_mylists(session, count))

    if result.data is None:
        _console.print(f"[yellow]Response without data (status {result.meta.status}).[/yellow]")
    else:
        _console.print(build_mylists_table(result.data.mylists))

    if json_path is not None:
        export_result_json(result=result, output_path=json_path)
        _console.print(f"[green]Saved JSON to:[/green] {json_path}")


@app.command()
def mylist(
    mylist_id: int = typer.Argument(..., min=1, help="Mylist ID."),
    page: int = typer.Option(1, "--page", min=1, help="Page number (1-based)."),
    page_size: int = typer.Option(100, "--page-size", min=1, help="Items per page."),
    all_pages: bool = typer.Option(False, "--all", help="Fetch every page (page size 100)."),
    json_path: Path | None = typer.Option(None, "--json", help="Also write the raw response as JSON."),
) -> None:
    """Show the items of one mylist."""

    settings = AppSettings()
    session = _require_session(settings)
    client = _build_client(settings)

    if all_pages:
        hooks = PaginationHooks(
            page_fetched=lambda n, count: _console.print(f"[dim]page {n}: {count} items[/dim]"),
        )
        result = _run(client.fetch_mylist_all(session, mylist_id, hooks=hooks))
    else:
        result = _run(client.fetch_mylist_page(session, mylist_id, page_size, page))

    if result.data is None:
        _console.print(f"[yellow]Response without data (status {result.meta.status}).[/yellow]")
    else:
        detail = result.data.mylist
        _console.print(build_mylist_panel(detail))
        _console.print(build_items_table(detail.items))
        if detail.has_next and not all_pages:
            _console.print(f"[dim]More items available: --page {page + 1} or --all[/dim]")

    if json_path is not None:
        export_result_json(result=result, output_path=json_path)
        _console.print(f"[green]Saved JSON to:[/green] {json_path}")


@app.command()
def login() -> None:
    """Store the niconico session cookies in the user config .env.

    Copy `user_session` and `user_session_secure` from a logged-in browser.
    """

    print_banner(_console)
    user_session = typer.prompt("user_session", hide_input=True).strip()
    user_session_secure = typer.prompt("user_session_secure", hide_input=True).strip()
    if not user_session or not user_session_secure:
        raise typer.BadParameter("both cookies are required")

    env_path = write_user_env_vars(
        {
            "NICO_MYLIST_USER_SESSION": user_session,
            "NICO_MYLIST_USER_SESSION_SECURE": user_session_secure,
        }
    )
    _console.print(f"[green]Saved session to:[/green] {env_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
