"""Tests for the typer command line."""

import pytest
from sqlmodel import select
from typer.testing import CliRunner

from src.app.core.services import DbSessionService
from src.app.entities import ProductOptionTable, ProductTable
from src.app.runtime.config.config_data import ConfigData, DatabaseConfig
from src.app.runtime.context import with_context
from src.cli import app

runner = CliRunner()


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "cli" / "products.db")


@pytest.fixture
def cli_config(db_path):
    """Point the CLI at a throwaway database file."""
    config = ConfigData()
    config.database.path = db_path
    with with_context(config):
        yield config


def count_rows(db_path: str) -> tuple[int, int]:
    service = DbSessionService(DatabaseConfig(path=db_path))
    try:
        with service.session_scope() as session:
            products = len(session.exec(select(ProductTable)).all())
            options = len(session.exec(select(ProductOptionTable)).all())
    finally:
        service.dispose()
    return products, options


class TestDbCommands:
    def test_init_db_creates_file(self, cli_config, db_path):
        result = runner.invoke(app, ["db", "init-db"])

        assert result.exit_code == 0, result.output
        assert "Database ready" in result.output
        assert count_rows(db_path) == (0, 0)

    def test_seed_inserts_sample_catalogue(self, cli_config, db_path):
        result = runner.invoke(app, ["db", "seed"])

        assert result.exit_code == 0, result.output
        assert "Sample data inserted" in result.output
        assert count_rows(db_path) == (3, 3)

    def test_seed_twice_appends(self, cli_config, db_path):
        runner.invoke(app, ["db", "seed"])
        runner.invoke(app, ["db", "seed"])

        assert count_rows(db_path) == (6, 6)

    def test_seed_reset_starts_over(self, cli_config, db_path):
        runner.invoke(app, ["db", "seed"])
        result = runner.invoke(app, ["db", "seed", "--reset"])

        assert result.exit_code == 0, result.output
        assert count_rows(db_path) == (3, 3)


class TestServerCommands:
    def test_serve_runs_uvicorn_with_config_defaults(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append((args, kwargs)))

        config = ConfigData()
        config.app.host = "0.0.0.0"
        config.app.port = 8123
        with with_context(config):
            result = runner.invoke(app, ["server", "serve"])

        assert result.exit_code == 0, result.output
        (args, kwargs), = calls
        assert args == ("src.app.api.http.app:app",)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8123
        assert kwargs["reload"] is False

    def test_serve_options_override_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: calls.append(kwargs))

        result = runner.invoke(
            app, ["server", "serve", "--host", "127.0.0.1", "--port", "9001", "--reload"]
        )

        assert result.exit_code == 0, result.output
        assert calls[0]["host"] == "127.0.0.1"
        assert calls[0]["port"] == 9001
        assert calls[0]["reload"] is True
