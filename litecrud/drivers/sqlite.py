"""SQLite driver backed by the standard-library ``sqlite3`` module.

The connection is opened in autocommit mode (``isolation_level=None``) so
that every statement commits on its own unless a transaction has been
started explicitly with :meth:`SQLiteDriver.begin_transaction`.

All SQL is produced by :class:`~litecrud.compile.builder.StatementBuilder`;
this module only executes it and turns the outcome into a
:class:`~litecrud.drivers.base.QueryResult`.
"""
from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from litecrud.compile.base import CompiledSQL
from litecrud.compile.builder import StatementBuilder
from litecrud.compile.sqlite import SQLiteCompiler
from litecrud.drivers.base import DatabaseDriver, QueryResult, Transaction
from litecrud.drivers.registry import DriverFactory
from litecrud.errors import (
    ConfigurationError,
    DatabaseConnectionError,
    EngineExecutionError,
    LiteCrudError,
    NotConnectedError,
    SchemaError,
    TransactionStateError,
)
from litecrud.logging import get_logger
from litecrud.schema.conditions import JoinDescriptor
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.table import TableSchema
from litecrud.settings import get_settings

log = get_logger(__name__)


class SQLiteTransaction(Transaction):
    """Transaction handle for :class:`SQLiteDriver`.

    Bound to the connection that was open when the transaction began; once
    that connection is closed the handle reports :class:`NotConnectedError`.
    """

    def __init__(self, driver: SQLiteDriver, conn: sqlite3.Connection) -> None:
        self._driver = driver
        self._conn = conn
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def commit(self) -> QueryResult:
        return self._finish("COMMIT")

    def rollback(self) -> QueryResult:
        return self._finish("ROLLBACK")

    def _finish(self, statement: str) -> QueryResult:
        try:
            if not self._active:
                raise TransactionStateError(
                    f"Cannot {statement}: transaction already finished."
                )
            if self._driver.connection is not self._conn:
                raise NotConnectedError(
                    f"Cannot {statement}: the connection was closed."
                )
            self._driver.execute(CompiledSQL(sql=statement))
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        self._active = False
        self._driver.end_transaction(self)
        return QueryResult.ok()


@DriverFactory.register("sqlite")
class SQLiteDriver(DatabaseDriver):
    """Uniform CRUD API over a single SQLite connection."""

    def __init__(self) -> None:
        self._conn: sqlite3.Connection | None = None
        self._location: str | None = None
        self._transaction: SQLiteTransaction | None = None
        self._builder = StatementBuilder(SQLiteCompiler())

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    @property
    def connected(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection | None:
        """The open ``sqlite3`` connection, or ``None``."""
        return self._conn

    def connect(
        self, config: ConnectionConfig | Mapping[str, Any] | None = None
    ) -> QueryResult:
        """Open (creating if needed) the SQLite file at ``config.filename``.

        When ``config`` is ``None`` the filename comes from
        ``LITECRUD_FILENAME``.
        """
        try:
            if self._conn is not None:
                raise ConfigurationError(
                    f"Already connected to '{self._location}'; disconnect first."
                )
            filename = self._resolve_filename(config)
            try:
                conn = sqlite3.connect(filename, isolation_level=None)
            except sqlite3.Error as exc:
                raise DatabaseConnectionError(
                    f"Cannot open SQLite database '{filename}': {exc}",
                    location=filename,
                ) from exc
        except LiteCrudError as exc:
            log.warning("connect_failed", error=str(exc))
            return QueryResult.fail(exc)

        conn.row_factory = sqlite3.Row
        self._conn = conn
        self._location = filename
        log.info("connected", driver=self.name, location=filename)
        return QueryResult.ok()

    def disconnect(self) -> QueryResult:
        if self._conn is None:
            return QueryResult.ok()
        try:
            self._conn.close()
        except sqlite3.Error as exc:
            return QueryResult.fail(
                EngineExecutionError(f"Failed to close connection: {exc}")
            )
        log.info("disconnected", driver=self.name, location=self._location)
        self._conn = None
        self._location = None
        self._transaction = None
        return QueryResult.ok()

    # ------------------------------------------------------------------
    # DDL
    # ------------------------------------------------------------------

    def create_database(self, name: str) -> QueryResult:
        # SQLite creates the database file on connect.
        return QueryResult.ok({"message": f"Database {name} ready"})

    def create_table(self, schema: TableSchema | Mapping[str, Any]) -> QueryResult:
        try:
            self._require_connection()
            compiled = self._builder.create_table(self._coerce_schema(schema))
            self.execute(compiled)
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        return QueryResult.ok()

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def begin_transaction(self) -> QueryResult:
        try:
            conn = self._require_connection()
            if self._transaction is not None and self._transaction.active:
                raise TransactionStateError(
                    "A transaction is already in progress on this connection."
                )
            self.execute(CompiledSQL(sql="BEGIN TRANSACTION"))
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        self._transaction = SQLiteTransaction(self, conn)
        return QueryResult.ok(self._transaction)

    def end_transaction(self, tx: SQLiteTransaction) -> None:
        """Forget ``tx`` once it has committed or rolled back."""
        if self._transaction is tx:
            self._transaction = None

    # ------------------------------------------------------------------
    # DML
    # ------------------------------------------------------------------

    def insert(self, table: str, row: Mapping[str, Any]) -> QueryResult:
        try:
            self._require_connection()
            cursor = self.execute(self._builder.insert(table, row))
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        return QueryResult.ok({"id": cursor.lastrowid})

    def select(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        where: Mapping[str, Any] | None = None,
        joins: Iterable[JoinDescriptor | Mapping[str, Any]] | None = None,
    ) -> QueryResult:
        try:
            self._require_connection()
            compiled = self._builder.select(table, columns, where, joins)
            with self._engine_errors(compiled):
                rows = [dict(row) for row in self.execute(compiled).fetchall()]
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        return QueryResult.ok(rows)

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        where: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        try:
            self._require_connection()
            cursor = self.execute(self._builder.update(table, changes, where))
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        return QueryResult.ok({"changes": cursor.rowcount})

    def delete(
        self, table: str, where: Mapping[str, Any] | None = None
    ) -> QueryResult:
        try:
            self._require_connection()
            cursor = self.execute(self._builder.delete(table, where))
        except LiteCrudError as exc:
            return QueryResult.fail(exc)
        return QueryResult.ok({"changes": cursor.rowcount})

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, compiled: CompiledSQL) -> sqlite3.Cursor:
        """Run one compiled statement on the open connection.

        Raises:
            NotConnectedError: If no connection is open.
            EngineExecutionError: If SQLite rejects the statement.
        """
        conn = self._require_connection()
        with self._engine_errors(compiled):
            cursor = conn.execute(compiled.sql, compiled.params)
        log.debug("statement_executed", sql=compiled.sql, params=len(compiled.params))
        return cursor

    @contextmanager
    def _engine_errors(self, compiled: CompiledSQL) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            log.warning("statement_failed", sql=compiled.sql, error=str(exc))
            raise EngineExecutionError(
                str(exc), sql=compiled.sql, params=len(compiled.params)
            ) from exc

    def _require_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise NotConnectedError()
        return self._conn

    # ------------------------------------------------------------------
    # Input coercion
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_filename(config: ConnectionConfig | Mapping[str, Any] | None) -> str:
        if config is None:
            filename = get_settings().filename
        else:
            if not isinstance(config, ConnectionConfig):
                try:
                    config = ConnectionConfig.model_validate(dict(config))
                except PydanticValidationError as exc:
                    raise ConfigurationError(
                        f"Invalid connection config: {exc}"
                    ) from exc
            filename = config.filename
        if not filename:
            raise ConfigurationError("SQLite requires a filename", key="filename")
        return filename

    @staticmethod
    def _coerce_schema(schema: TableSchema | Mapping[str, Any]) -> TableSchema:
        if isinstance(schema, TableSchema):
            return schema
        try:
            return TableSchema.model_validate(schema)
        except PydanticValidationError as exc:
            raise SchemaError(
                f"Invalid table schema: {exc}",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
