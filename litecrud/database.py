"""Front facade: pick a driver by name and delegate every call to it."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from types import TracebackType
from typing import Any

from litecrud.drivers import DatabaseDriver, DriverFactory, QueryResult, Transaction
from litecrud.schema.conditions import JoinDescriptor
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.table import TableSchema
from litecrud.settings import get_settings


class Database:
    """Uniform CRUD/schema API over a registered driver.

    The driver is resolved at construction, so an unknown name fails
    immediately rather than on first use::

        with Database("sqlite") as db:
            db.connect({"filename": "app.db"}).unwrap()
            db.create_table(users_schema)
            db.insert("users", {"username": "a"})

    Leaving the ``with`` block disconnects.

    Args:
        driver: Registered driver name (``'sqlite'``).  Defaults to
            ``LITECRUD_DRIVER``, itself defaulting to ``'sqlite'``.

    Raises:
        ConfigurationError: If ``driver`` is not registered.
    """

    def __init__(self, driver: str | None = None) -> None:
        if driver is None:
            driver = get_settings().driver
        self._driver: DatabaseDriver = DriverFactory.create(driver)

    @property
    def driver(self) -> DatabaseDriver:
        return self._driver

    @property
    def connected(self) -> bool:
        return self._driver.connected

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._driver.disconnect()

    def connect(
        self, config: ConnectionConfig | Mapping[str, Any] | None = None
    ) -> QueryResult:
        return self._driver.connect(config)

    def disconnect(self) -> QueryResult:
        return self._driver.disconnect()

    def create_database(self, name: str) -> QueryResult:
        return self._driver.create_database(name)

    def create_table(self, schema: TableSchema | Mapping[str, Any]) -> QueryResult:
        return self._driver.create_table(schema)

    def begin_transaction(self) -> QueryResult:
        return self._driver.begin_transaction()

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        with self._driver.transaction() as tx:
            yield tx

    def insert(self, table: str, row: Mapping[str, Any]) -> QueryResult:
        return self._driver.insert(table, row)

    def select(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        where: Mapping[str, Any] | None = None,
        joins: Iterable[JoinDescriptor | Mapping[str, Any]] | None = None,
    ) -> QueryResult:
        return self._driver.select(table, columns, where, joins)

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        where: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        return self._driver.update(table, changes, where)

    def delete(
        self, table: str, where: Mapping[str, Any] | None = None
    ) -> QueryResult:
        return self._driver.delete(table, where)
