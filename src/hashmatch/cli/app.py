"""CLI application factory."""

from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands.algorithms import algorithms
from .commands.compare import compare
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional fully built CLIState, takes precedence over settings

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="hashmatch",
        help="hashmatch - Compare file digests across one or more hash algorithms",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        chunk_size: Optional[int] = typer.Option(
            None,
            "--chunk-size",
            help="Read size in bytes used while hashing",
            min=1,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                chunk_size=chunk_size,
                log_level=LogLevel.DEBUG if verbose else None,
            )

        create_app(resolved_settings)
        ctx.obj = CLIState(resolved_settings)

    app.command()(compare)
    app.command()(algorithms)
    return app
