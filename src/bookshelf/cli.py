#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf API server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload/--no-reload",
    default=settings.api_reload,
    show_default=True,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    log_level = log_level.lower()
    debug = log_level == "debug"

    # Settings are loaded once per process and the app module configures
    # logging from them on import
    settings.debug = debug
    settings.log_level = log_level.upper()
    configure_logging(debug=debug, level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The reloader's subprocess loads its settings from the environment
    os.environ["BOOKSHELF_DEBUG"] = "true" if debug else "false"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level

    try:
        if reload:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema as SDL."""
    from bookshelf.graphql.schema import print_schema_sdl

    click.echo(print_schema_sdl())


@cli.command()
def stats() -> None:
    """Show how many records the seeded store holds."""
    from bookshelf.store import get_store

    counts = get_store().counts()
    click.echo(f"Authors: {counts['authors']}")
    click.echo(f"Books: {counts['books']}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
