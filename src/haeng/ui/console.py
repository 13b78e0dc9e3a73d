"""Rich console output for haeng."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# Global console instances for consistent output. Playlist URLs are long,
# so lines are never wrapped.
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to print.
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error line to stderr.

    Args:
        message: The message to print.
    """
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message to stderr.

    Args:
        message: The message to print.
    """
    err_console.print(f"[yellow]![/yellow] {escape(message)}", style="yellow")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: The message to print.
    """
    console.print(f"[blue]→[/blue] {escape(message)}")


def print_playlists(entries: list[tuple[str, str]]) -> None:
    """Print registered playlists, one per line."""
    console.print("[bold]Playlists:[/bold]")
    for name, url in entries:
        console.print(f"\t[cyan]{escape(name)}[/cyan] - {escape(url)}")
