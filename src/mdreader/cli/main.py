"""CLI main entry point using Typer."""

import logging
import webbrowser
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.logging import RichHandler

from mdreader import __version__
from mdreader.config.models import VALID_THEMES, ViewerConfig
from mdreader.config.settings import (
    DEBOUNCE_DELAY_MS,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_THEME,
)
from mdreader.errors import FileNotFound, NoPathProvided, WatchSetupError
from mdreader.resolver import resolve_existing_file

# Exit codes
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_WATCH_SETUP = 4
EXIT_PORT_IN_USE = 5

USAGE = "Usage: md-reader <file.md> [options]"

app = typer.Typer(
    name="md-reader",
    help="Single-file Markdown viewer with live reload",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"md-reader v{__version__}")
        raise typer.Exit()


@app.command()
def view(
    path: Optional[str] = typer.Argument(
        None,
        help="Markdown file to view (absolute, or relative to the working directory)",
        show_default=False,
    ),
    port: int = typer.Option(
        DEFAULT_PORT,
        "--port",
        "-p",
        help="Port to bind server (1024-65535)",
        min=1024,
        max=65535,
    ),
    host: str = typer.Option(
        DEFAULT_HOST,
        "--host",
        "-h",
        help="Host to bind server",
    ),
    theme: str = typer.Option(
        DEFAULT_THEME,
        "--theme",
        "-t",
        help=f"UI theme ({'/'.join(VALID_THEMES)})",
    ),
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Don't open browser automatically",
    ),
    no_reload: bool = typer.Option(
        False,
        "--no-reload",
        help="Disable live reload",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "--log",
        "-l",
        help="Logging level (DEBUG/INFO/WARNING/ERROR)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """View a Markdown file and reload it whenever it changes on disk."""
    try:
        file_path = resolve_existing_file(path, Path.cwd())
    except NoPathProvided as e:
        err_console.print(USAGE, markup=False, highlight=False)
        err_console.print(str(e), markup=False)
        raise typer.Exit(code=EXIT_USAGE)
    except FileNotFound as e:
        err_console.print(f"[red]✗[/red] {e}", style="bold")
        raise typer.Exit(code=EXIT_NOT_FOUND)

    if file_path.suffix.lower() not in (".md", ".markdown"):
        err_console.print(f"[yellow]![/yellow] {file_path.name} does not have a .md extension")

    config = ViewerConfig(
        host=host,
        port=port,
        file_path=file_path,
        theme=theme,
        open_browser=not no_open,
        reload_enabled=not no_reload,
        log_level=log_level,
        debounce_ms=DEBOUNCE_DELAY_MS,
    )

    try:
        config.validate()
    except ValueError as e:
        err_console.print(f"[red]✗[/red] Configuration error: {e}", style="bold")
        raise typer.Exit(code=EXIT_USAGE)

    setup_logging(config.log_level)

    from mdreader.server.app import create_app

    server_app = create_app(config)

    # Watcher setup failures are fatal
    if server_app.state.watcher is not None:
        try:
            server_app.state.watcher.start()
        except WatchSetupError as e:
            err_console.print(f"[red]✗[/red] {e}", style="bold")
            raise typer.Exit(code=EXIT_WATCH_SETUP)

    try:
        from mdreader.server.banner import print_banner

        print_banner(
            host=host,
            port=port,
            file_path=config.file_path,
            theme=config.theme,
            reload_enabled=config.reload_enabled,
            console=console,
        )

        if config.open_browser:
            import threading
            import time

            def open_browser_delayed() -> None:
                time.sleep(1.5)  # Wait for server to start
                webbrowser.open(f"http://{host}:{port}")

            threading.Thread(target=open_browser_delayed, daemon=True).start()

        uvicorn.run(
            server_app,
            host=host,
            port=port,
            log_level=log_level.lower(),
        )

    except KeyboardInterrupt:
        console.print("\n[yellow]Viewer stopped[/yellow]")
        raise typer.Exit(code=0)
    except OSError as e:
        if "address already in use" in str(e).lower():
            err_console.print(f"[red]✗[/red] Port {port} is already in use", style="bold")
            raise typer.Exit(code=EXIT_PORT_IN_USE)
        err_console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)
    except Exception as e:
        err_console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)
    finally:
        if server_app.state.watcher is not None:
            server_app.state.watcher.stop()


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
