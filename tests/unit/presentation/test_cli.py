"""Tests for the typer CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from userhub.presentation.api.dependencies import (
    get_database_url,
    get_engine,
    get_session_maker,
)
from userhub.presentation.cli.app import app
from userhub_config import clear_settings_cache

runner = CliRunner()


def _clear_caches() -> None:
    clear_settings_cache()
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    db_file = tmp_path / "nested" / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")
    _clear_caches()
    yield db_file
    _clear_caches()


class TestInitDb:
    def test_creates_database_file(self, database_url):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0, result.output
        assert database_url.exists()
        assert "up to date" in result.output

    def test_is_idempotent(self, database_url):
        runner.invoke(app, ["init-db"])
        _clear_caches()

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0, result.output


class TestServe:
    def test_runs_uvicorn_with_options(self):
        with patch("uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9000"])

        assert result.exit_code == 0, result.output
        run.assert_called_once_with(
            "userhub.presentation.api.app:app",
            host="127.0.0.1",
            port=9000,
            reload=False,
        )
