"""Startup banner printed before the server starts."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mdreader import __version__


def print_banner(
    host: str,
    port: int,
    file_path: Path,
    theme: str,
    reload_enabled: bool,
    console: Console | None = None,
) -> None:
    """Print the watched file and server URL."""
    console = console or Console()

    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", justify="right")
    table.add_column()
    table.add_row("watching", str(file_path) if reload_enabled else f"{file_path} (reload off)")
    table.add_row("serving", f"[bold cyan]http://{host}:{port}[/bold cyan]")
    table.add_row("theme", theme)

    console.print(
        Panel(
            table,
            title=f"[bold blue]md-reader[/bold blue] v{__version__}",
            title_align="left",
            expand=False,
        )
    )
