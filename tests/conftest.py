"""Shared pytest fixtures for litecrud unit and integration tests."""
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from litecrud.compile.builder import StatementBuilder
from litecrud.compile.sqlite import SQLiteCompiler
from litecrud.database import Database
from tests.fixtures import seed


@pytest.fixture(scope="session")
def compiler() -> SQLiteCompiler:
    return SQLiteCompiler()


@pytest.fixture(scope="session")
def builder(compiler: SQLiteCompiler) -> StatementBuilder:
    return StatementBuilder(compiler)


@pytest.fixture()
def db() -> Iterator[Database]:
    """A connected in-memory database with no tables."""
    with Database("sqlite") as database:
        database.connect({"filename": ":memory:"}).unwrap()
        yield database


@pytest.fixture()
def seeded(db: Database) -> Database:
    """``db`` with the sample ``users`` and ``posts`` tables populated."""
    seed(db)
    return db


@pytest.fixture()
def db_file(tmp_path: Path) -> str:
    """Path to a not-yet-existing SQLite file."""
    return str(tmp_path / "test.db")
