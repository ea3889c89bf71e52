#!/usr/bin/env python3
"""
Main CLI entry point for the Bookstore server.
"""

import os
import sys

import click
import uvicorn

from bookstore import __version__
from bookstore.config import settings
from bookstore.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookstore")
def cli() -> None:
    """Bookstore CLI - run the GraphQL server and inspect its schema."""
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
    help="Port to bind to (also read from the PORT environment variable)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookstore API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Bookstore API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Read by the app module when uvicorn imports it in reload mode
    if log_level == "debug":
        os.environ["BOOKSTORE_DEBUG"] = "true"
        os.environ["BOOKSTORE_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSTORE_DEBUG", "false")
        os.environ.setdefault("BOOKSTORE_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "bookstore.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookstore.api.app import create_app

            app = create_app(
                settings.model_copy(
                    update={"debug": log_level == "debug", "log_level": log_level}
                )
            )
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
    """Print the GraphQL schema in SDL form."""
    from bookstore.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    cli()
