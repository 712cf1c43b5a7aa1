"""Database commands: apply migrations, show store statistics."""

import asyncio
import sys

import cyclopts

from blogstore.application.di import create_container
from blogstore.cli.console import get_console
from blogstore.config import Config
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.error import StoreError
from blogstore.infrastructure.persistence.migrate import current_revision, run_migrations

app = cyclopts.App(name="db", help="Inspect and migrate the durable store")


@app.command
def migrate() -> None:
    """Apply pending schema migrations to the configured database."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    run_migrations(config.database.url)
    console.success(f"Database is up to date: {config.database.url}")


async def _stats() -> tuple[int, int, list[int]]:
    container = create_container()
    try:
        service = await container.get(PostService)
        return await service.stats()
    finally:
        await container.close()


@app.command
def stats() -> None:
    """Show post count, the next id to be issued, the schema revision and the live id range."""
    console = get_console()
    revision = current_revision(Config().database.url)  # type: ignore[call-arg]
    try:
        count, next_id, ids = asyncio.run(_stats())
    except StoreError as e:
        console.error(e.message, hint=f"code: {e.code}")
        sys.exit(1)

    console.print(f"[bold]Posts:[/bold] {count:,}")
    console.print(f"[bold]Next id:[/bold] {next_id}")
    console.print(f"[bold]Schema revision:[/bold] {revision or 'unmigrated'}")
    if ids:
        console.print(f"[bold]Live ids:[/bold] {ids[0]} .. {ids[-1]}")
    else:
        console.info("No posts stored")
