"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="giga-tactics",
    help="Expected-value combat and loot advisor for Gigaverse dungeon runs",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _make_app(config: Optional[Path], verbose: bool):
    from giga_tactics.app import AdvisorApp

    _setup_logging(verbose)
    return AdvisorApp(config_path=config)


def _show_error(message: str) -> None:
    from giga_tactics.cli.display import AdvisorDisplay

    AdvisorDisplay().show_error(message)


@app.command()
def move(
    state_file: Path = typer.Argument(..., help="Dungeon state JSON"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions"),
) -> None:
    """Recommend the next combat move."""
    try:
        _make_app(config, verbose).show_move(state_file)
    except (ValueError, OSError) as e:
        _show_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def loot(
    state_file: Path = typer.Argument(..., help="Dungeon state JSON with lootOptions"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Loot strategy name"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions"),
) -> None:
    """Recommend which loot option to take."""
    try:
        _make_app(config, verbose).show_loot(state_file, strategy)
    except (ValueError, OSError) as e:
        _show_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def strategies(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
) -> None:
    """List the built-in loot strategies."""
    try:
        _make_app(config, verbose=False).show_strategies()
    except (ValueError, OSError) as e:
        _show_error(str(e))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
