"""API server CLI commands."""

import typer
from rich.panel import Panel

from src.app.runtime.context import get_config

from .utils import console

server_app = typer.Typer(help="🚀 Server commands")


@server_app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the Products API with uvicorn."""
    import uvicorn

    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Products API on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.app.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )
