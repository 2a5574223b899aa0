"""CLI entry point: noodlebar.

Subcommands:
    noodlebar serve              # Run the HTTP API under uvicorn
    noodlebar init-db            # Create tables and indexes, then exit
"""

from __future__ import annotations

import asyncio
import logging

import click
from dotenv import load_dotenv

from noodlebar.core.config import Settings
from noodlebar.core.database import Database
from noodlebar.core.logging import setup_logging


@click.group()
@click.option("--env-file", default=".env", help="dotenv file to load before reading settings")
def main(env_file: str) -> None:
    """noodlebar — food-ordering demo backend."""
    load_dotenv(env_file)


@main.command()
@click.option("--host", default=None, help="Bind address (default: NOODLEBAR_HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Listen port (default: PORT or 5678)")
def serve(host: str | None, port: int | None) -> None:
    """Run the API server."""
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings)
    bind_host = host or settings.host
    bind_port = port or settings.port
    logging.getLogger(__name__).info("Server is running on port %d", bind_port)
    # the factory re-reads Settings from the same environment; log_config=None
    # keeps the structlog handlers it installs
    uvicorn.run(
        "noodlebar.api:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        log_config=None,
    )


@main.command("init-db")
def init_db() -> None:
    """Create every table and index, then exit."""
    settings = Settings.from_env()

    async def _run() -> None:
        db = Database(settings.database_url)
        db.open()
        try:
            await db.create_all()
        finally:
            await db.close()

    try:
        asyncio.run(_run())
    except Exception as e:
        click.echo(f"Error: could not initialise database: {e}", err=True)
        raise SystemExit(1)
    click.echo("Database schema is up to date.")
