"""``products-api`` command line: database upkeep and the API server."""

import typer

from .db_commands import db_app
from .server_commands import server_app

app = typer.Typer(
    help="🛠️  Products API CLI - database and server management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(db_app, name="db")
app.add_typer(server_app, name="server")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
