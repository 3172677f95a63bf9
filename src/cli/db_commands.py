"""Database management CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.app.runtime.context import get_config
from src.app.runtime.init_db import init_db as create_tables

from .utils import console, open_database

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command(name="init-db")
def init_db() -> None:
    """Create the catalogue tables in the configured SQLite file."""
    create_tables()
    console.print(
        f"[green]✅ Database ready at[/green] [bold]{get_config().database.path}[/bold]"
    )


@db_app.command(name="seed")
def seed(
    reset: bool = typer.Option(
        False, "--reset", help="Drop and recreate the tables before seeding"
    ),
) -> None:
    """Insert the sample catalogue (three products, three options)."""
    database_service, manage_service = open_database()
    try:
        if reset:
            manage_service.drop_all()
        manage_service.create_all()
        products = manage_service.seed()
    finally:
        database_service.dispose()

    table = Table(title="Seeded products")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    table.add_column("Delivery", justify="right")
    for product in products:
        table.add_row(
            product.id,
            product.name,
            f"{product.price:.2f}",
            f"{product.delivery_price:.2f}",
        )

    console.print(Panel.fit("[bold green]Sample data inserted[/bold green]"))
    console.print(table)
