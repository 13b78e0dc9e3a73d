"""CLI implementation for haeng."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

import typer

from haeng import __version__
from haeng.core import Config, HaengError, format_error
from haeng.download import Orchestrator
from haeng.registry import RegistryStore, add, list_playlists, remove
from haeng.ui import print_error, print_playlists, setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable

    from haeng.registry import Registry

# Create Typer app
app = typer.Typer(
    name="haeng",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


@dataclass
class Session:
    """State loaded once per invocation and shared by every command."""

    config: Config
    store: RegistryStore
    registry: Registry

    @property
    def orchestrator(self) -> Orchestrator:
        return Orchestrator(self.config, self.store)


def open_session() -> Session:
    """Resolve configuration and load the registry from disk.

    Raises:
        EnvMissingError: If HAENG_PATH is not set.
        FileCreateError: If the playlists file cannot be created.
        FileReadError: If the playlists file cannot be read.
    """
    config = Config.from_env()
    store = RegistryStore(config.registry_path)
    store.ensure_file_exists()
    return Session(config=config, store=store, registry=store.load())


def run(action: Callable[[Session], object]) -> None:
    """Open a session and run an action, turning errors into exit code 1.

    System errors that escape an action get the same single-line report.
    """
    try:
        action(open_session())
    except (HaengError, OSError) as e:
        print_error(format_error(e))
        raise typer.Exit(code=1) from e


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print(f"haeng version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging.",
        ),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """A playlist download manager.

    If no command is provided, haeng will try to download all currently
    saved playlists.
    """
    setup_logging(verbose)

    if ctx.invoked_subcommand is None:
        run(lambda session: session.orchestrator.download_all(session.registry))


@app.command("add", no_args_is_help=True)
def add_command(
    name: Annotated[str, typer.Argument(help="The name of the playlist.")],
    url: Annotated[str, typer.Argument(help="The URL to the playlist.")],
) -> None:
    """Add a YouTube playlist."""
    run(lambda session: add(session.store, session.registry, name, url))


@app.command("remove", no_args_is_help=True)
def remove_command(
    name: Annotated[
        str, typer.Argument(help="The name of the playlist that should be removed.")
    ],
) -> None:
    """Remove a YouTube playlist."""
    run(lambda session: remove(session.store, session.registry, name))


@app.command("view")
def view_command() -> None:
    """View all playlists currently tracked."""
    run(lambda session: print_playlists(list_playlists(session.registry)))


@app.command("download", no_args_is_help=True)
def download_command(
    name: Annotated[str, typer.Argument(help="The name of the playlist.")],
    url: Annotated[
        str | None,
        typer.Argument(
            help="The URL to the playlist. Optional if NAME is already saved.",
            show_default=False,
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            "-s",
            help="Save the playlist before downloading.",
        ),
    ] = False,
) -> None:
    """Download a specific playlist."""
    run(
        lambda session: session.orchestrator.download_one(
            session.registry, name, url, save=save
        )
    )


if __name__ == "__main__":
    app()
