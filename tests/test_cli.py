"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest
from sqlalchemy import create_engine as create_sync_engine
from sqlalchemy import inspect, text

from petclinic.__main__ import build_parser, main

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def database_path(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "cli.db"
    monkeypatch.setenv("PETCLINIC_DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    monkeypatch.setenv("PETCLINIC_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("PETCLINIC_DB_POOL_SIZE", raising=False)
    monkeypatch.chdir(PROJECT_ROOT)
    return path


def count_owners(database_path: Path) -> int:
    engine = create_sync_engine(f"sqlite:///{database_path}")
    try:
        with engine.connect() as conn:
            return conn.execute(text("SELECT count(*) FROM owners")).scalar()
    finally:
        engine.dispose()


class TestParser:
    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])

        assert args.host == "0.0.0.0"
        assert args.port == 8080

    def test_migrate_options(self):
        args = build_parser().parse_args(["migrate", "--revision", "001", "--sql"])

        assert args.revision == "001"
        assert args.sql is True

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    def test_seed(self, database_path):
        assert main(["seed"]) == 0
        assert count_owners(database_path) == 10

        assert main(["seed"]) == 0
        assert count_owners(database_path) == 10

    def test_migrate(self, database_path):
        assert main(["migrate"]) == 0

        engine = create_sync_engine(f"sqlite:///{database_path}")
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"owners", "pets", "visits", "vets"} <= tables

    def test_migrate_failure(self, database_path):
        assert main(["migrate", "--revision", "999"]) == 1

    def test_invalid_configuration(self, database_path, monkeypatch, capsys):
        monkeypatch.setenv("PETCLINIC_DB_POOL_SIZE", "0")

        assert main(["seed"]) == 2
        assert "Configuration error" in capsys.readouterr().err
