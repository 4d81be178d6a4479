"""Command-line interface for Dynadocs.

This module provides the CLI commands for running and managing
the Dynadocs application.
"""

import asyncio
from typing import NoReturn

import click

from dynadocs.core.config import get_settings
from dynadocs.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Dynadocs")
def cli() -> None:
    """Dynadocs - schema-validated dynamic document store.

    Settings are read from DYNADOCS_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Dynadocs server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Dynadocs server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "dynadocs.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
def init_db() -> None:
    """Create the schema and document tables if they don't exist."""
    from dynadocs.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    configure_logging(get_settings())

    async def initialize():
        try:
            await init_database()
            click.echo("Database initialized successfully.")
        finally:
            await get_db_manager().disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option(
    "--memory",
    is_flag=True,
    default=False,
    help="Use in-memory stores instead of the configured database",
)
def demo(memory: bool) -> None:
    """Create the demo 'products' collection with two sample documents."""
    from dynadocs.demo import DEMO_COLLECTION, create_demo_data
    from dynadocs.domain.exceptions import DynadocsError
    from dynadocs.domain.services import DocumentService, SchemaRegistry

    settings = get_settings()
    configure_logging(settings)
    timeout = settings.store_timeout_seconds

    async def run_in_memory():
        from dynadocs.infrastructure.persistence.memory import (
            InMemoryDocumentStore,
            InMemorySchemaStore,
        )

        registry = SchemaRegistry(InMemorySchemaStore(), store_timeout=timeout)
        service = DocumentService(registry, InMemoryDocumentStore(), store_timeout=timeout)
        return await create_demo_data(service)

    async def run_on_database():
        from dynadocs.infrastructure.persistence.database import (
            get_db_manager,
            init_database,
        )
        from dynadocs.infrastructure.persistence.repositories import (
            DocumentRepository,
            SchemaRepository,
        )

        db = get_db_manager()
        try:
            await init_database()
            async with db.session() as session:
                registry = SchemaRegistry(SchemaRepository(session), store_timeout=timeout)
                service = DocumentService(
                    registry, DocumentRepository(session), store_timeout=timeout
                )
                documents = await create_demo_data(service)
                await session.commit()
                return documents
        finally:
            await db.disconnect()

    try:
        documents = asyncio.run(run_in_memory() if memory else run_on_database())
    except DynadocsError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e

    if documents is None:
        click.echo(f"Demo data skipped: collection '{DEMO_COLLECTION}' already exists.")
        return

    click.echo(f"Demo schema '{DEMO_COLLECTION}' created.")
    for document in documents:
        click.echo(f"  {document.id}  {document.data}")
    if not memory:
        click.echo(
            f"Try: http://{settings.host}:{settings.port}"
            f"{settings.api_prefix}/collections/{DEMO_COLLECTION}/documents"
        )


@cli.command()
def info() -> None:
    """Display Dynadocs configuration."""
    settings = get_settings()

    click.echo(f"""
Dynadocs v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}
  Timeout:      {settings.store_timeout_seconds}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `dynadocs` command is run
    or when using `python -m dynadocs`.
    """
    cli()


if __name__ == "__main__":
    main()
