"""UserHub CLI application using Typer.

Command-line utilities for running the API server and preparing the
database.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from userhub_config.settings import get_settings

app = typer.Typer(
    name="userhub",
    help="UserHub - user accounts service CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from settings)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]Starting {settings.app_name} API[/bold green] "
        f"on [cyan]http://{bind_host}:{bind_port}[/cyan]",
    )
    uvicorn.run(
        "userhub.presentation.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
    )


@app.command("init-db")
def init_db() -> None:
    """Create missing database tables. Existing tables are left untouched."""
    from userhub.infrastructure.persistence.sqlalchemy import create_tables
    from userhub.presentation.api.dependencies import get_database_url, get_engine

    console.print(f"[bold]Database:[/bold] {get_database_url()}")

    async def _run() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print("[green]Database schema is up to date[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
