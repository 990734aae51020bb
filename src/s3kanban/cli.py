"""CLI entry point for s3kanban."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import uvicorn

from s3kanban.api.app import create_app
from s3kanban.board_store import BoardStore, BoardStoreError, CardStatus
from s3kanban.config import AppConfig, ConfigError, find_config, load_config
from s3kanban.logging import setup_logging
from s3kanban.repositioning import column

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config.yml (auto-detected if not specified)",
)


def _load(config_path: Path | None) -> AppConfig:
    if config_path is None:
        config_path = find_config()
    return load_config(config_path)


@click.group()
@click.version_option(package_name="s3kanban")
def main() -> None:
    """s3kanban - single-board task tracker stored in S3."""
    pass


@main.command()
@config_option
@click.option("--host", default=None, help="Bind address (default: from config or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port (default: from config or 8080)")
@click.option(
    "--memory",
    is_flag=True,
    help="Keep the board in process memory instead of S3 (no config needed)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    memory: bool,
    verbose: bool,
) -> None:
    """Run the HTTP API."""
    try:
        if memory:
            config = None
            store = BoardStore.in_memory()
            setup_logging(level="DEBUG" if verbose else None)
        else:
            config = _load(config_path)
            setup_logging(
                log_dir=config.logging.dir,
                level="DEBUG" if verbose else config.logging.level,
            )
            store = BoardStore.from_config(config.s3)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    bind_host = host or (config.server.host if config else "0.0.0.0")
    bind_port = port or (config.server.port if config else 8080)

    click.echo(f"Kanban server starting on {bind_host}:{bind_port}")
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(create_app(store=store), host=bind_host, port=bind_port, log_config=None)


@main.command()
@config_option
def check(config_path: Path | None) -> None:
    """Verify the configured bucket exists and is reachable."""
    try:
        config = _load(config_path)
        BoardStore.from_config(config.s3).check()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except BoardStoreError as e:
        click.echo(f"Storage error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Bucket {config.s3.bucket} is reachable")


@main.command()
@config_option
def show(config_path: Path | None) -> None:
    """Print the board grouped by column."""
    try:
        config = _load(config_path)
        board = BoardStore.from_config(config.s3).load()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except BoardStoreError as e:
        click.echo(f"Storage error: {e}", err=True)
        sys.exit(1)

    for status in CardStatus:
        cards = column(board.cards, status)
        click.echo(f"{status.value} ({len(cards)})")
        for card in cards:
            click.echo(f"  {card.position}. {card.title} [{card.id}]")


if __name__ == "__main__":
    main()
