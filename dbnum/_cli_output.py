"""Console notices printed by the dbnum commands."""

from __future__ import annotations

import typer


def info(message: str) -> None:
    """Print a neutral note, e.g. an option that has no effect for the chosen style."""
    typer.echo(f"[info] {message}")


def warn(message: str) -> None:
    """Print a warning, e.g. a value rendered through the plain-digit fallback."""
    typer.secho(f"[warn] {message}", fg=typer.colors.YELLOW)
