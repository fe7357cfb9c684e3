"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Item, Mylist, MylistDetail


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("nico-mylist", style="bold cyan")
    subtitle = Text("niconico mylists • nvapi", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _format_duration(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def build_mylists_table(mylists: Sequence[Mylist]) -> Table:
    """Tabla Rich con el listado de mylists del usuario."""

    table = Table(title="Mylists")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Items", style="green", justify="right")
    table.add_column("Public", style="magenta")
    table.add_column("Followers", style="dim", justify="right")
    table.add_column("Created", style="dim")
    for mylist in mylists:
        table.add_row(
            str(mylist.id),
            mylist.name,
            str(mylist.items_count),
            "yes" if mylist.is_public else "no",
            str(mylist.follower_count),
            mylist.created_at,
        )
    return table


def build_items_table(items: Sequence[Item], *, title: str = "Items") -> Table:
    """Tabla Rich con los items (videos) de una mylist."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Watch ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Length", style="green", justify="right")
    table.add_column("Views", style="magenta", justify="right")
    table.add_column("Added", style="dim")
    for index, item in enumerate(items, start=1):
        video = item.video
        table.add_row(
            str(index),
            item.watch_id,
            video.title,
            _format_duration(video.duration),
            f"{video.count.view:,}",
            item.added_at,
        )
    return table


def build_mylist_panel(detail: MylistDetail) -> Panel:
    """Panel resumen de una mylist (nombre, dueño, totales)."""

    body = Text()
    if detail.description.strip():
        body.append(detail.description.strip() + "\n\n")
    owner = detail.owner.name or detail.owner.id or detail.owner.owner_type
    body.append(f"Owner: {owner}\n")
    body.append(f"Items: {len(detail.items)} / {detail.total_item_count}")
    if detail.has_invisible_items:
        body.append("  (some items are hidden)", style="yellow")
    body.append(f"\nSort: {detail.default_sort_key} {detail.default_sort_order}", style="dim")
    return Panel(body, title=Text(detail.name, style="bold yellow"), border_style="yellow")
