"""Command-line entry point for the Student Records API."""

from __future__ import annotations

import click
import uvicorn

from studentapi import __version__
from studentapi.config import ConfigError, get_settings
from studentapi.logging import get_logger, sanitize_for_log, setup_logging

logger = get_logger("cli")


@click.group()
@click.version_option(__version__, prog_name="studentapi")
def main() -> None:
    """Student Records API - CRUD service for student records."""


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0).")
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=None,
    help="Port to listen on (default: PORT or 4000).",
)
@click.option(
    "--database-url",
    default=None,
    help="SQLAlchemy database URL (default: DATABASE_URL or sqlite:///students.db).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: STUDENTAPI_LOG_LEVEL or INFO).",
)
def serve(
    host: str | None,
    port: int | None,
    database_url: str | None,
    log_level: str | None,
) -> None:
    """Run the HTTP server."""
    try:
        settings = get_settings().with_overrides(
            host=host,
            port=port,
            database_url=database_url,
            log_level=log_level.upper() if log_level else None,
        )
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    from studentapi.api.app import create_app  # noqa: PLC0415

    setup_logging(log_dir=settings.log_dir, level=settings.log_level)
    logger.info(
        "Serving on %s:%d (database=%s)",
        settings.host,
        settings.port,
        sanitize_for_log(settings.database_url),
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
