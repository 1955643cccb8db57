"""litecrud – a uniform CRUD/schema API over embedded SQL engines.

Structured calls in, parameterized SQL out, results in one envelope.

Public API
----------
``Database``
    Front facade.  Picks a driver by name and delegates every call.

``connect``
    Shortcut returning a connected ``Database`` (raises on failure).

Every ``Database`` operation returns a ``QueryResult``; check ``success``
or call ``unwrap()``::

    import litecrud

    with litecrud.connect("app.db") as db:
        db.create_table({
            "name": "users",
            "columns": [
                {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True},
                {"name": "username", "type": "TEXT", "nullable": False, "unique": True},
            ],
        })
        db.insert("users", {"username": "a"}).unwrap()        # {"id": 1}
        db.select("users", where={"username": {"eq": "a"}})   # rows

Extensibility
-------------
New engines are registered via::

    from litecrud.drivers.registry import DriverFactory

    @DriverFactory.register("duckdb")
    class DuckDBDriver(DatabaseDriver):
        ...

After registration, ``Database("duckdb")`` picks it up automatically.
"""

from __future__ import annotations

from litecrud.compile.base import CompiledSQL, SQLCompiler
from litecrud.compile.builder import StatementBuilder
from litecrud.compile.sqlite import SQLiteCompiler
from litecrud.database import Database
from litecrud.drivers import (
    DatabaseDriver,
    DriverFactory,
    QueryResult,
    SQLiteDriver,
    Transaction,
)
from litecrud.errors import (
    ConditionError,
    ConfigurationError,
    DatabaseConnectionError,
    EngineExecutionError,
    LiteCrudError,
    NotConnectedError,
    SchemaError,
    TransactionStateError,
    ValidationError,
)
from litecrud.logging import get_logger, setup_logging
from litecrud.schema.conditions import Condition, FieldCondition, JoinDescriptor, JoinOn
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.converters import (
    schema_from_sqlalchemy,
    schemas_from_engine,
    schemas_from_metadata,
)
from litecrud.schema.table import ColumnDefinition, SQLExpression, TableSchema
from litecrud.settings import Settings, get_settings

__all__ = [
    # Facade
    "Database",
    "connect",
    # Drivers
    "DatabaseDriver",
    "DriverFactory",
    "QueryResult",
    "SQLiteDriver",
    "Transaction",
    # Schema types
    "ColumnDefinition",
    "TableSchema",
    "SQLExpression",
    "Condition",
    "FieldCondition",
    "JoinDescriptor",
    "JoinOn",
    "ConnectionConfig",
    # Converters
    "schema_from_sqlalchemy",
    "schemas_from_metadata",
    "schemas_from_engine",
    # Compilation
    "CompiledSQL",
    "SQLCompiler",
    "SQLiteCompiler",
    "StatementBuilder",
    # Configuration / logging
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    # Errors
    "LiteCrudError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "NotConnectedError",
    "EngineExecutionError",
    "TransactionStateError",
    "ValidationError",
    "SchemaError",
    "ConditionError",
]


def connect(filename: str, driver: str | None = None) -> Database:
    """Return a ``Database`` already connected to ``filename``.

    Unlike ``Database.connect``, failures are raised rather than returned::

        with litecrud.connect(":memory:") as db:
            ...

    Args:
        filename: Store location (``':memory:'`` for a private in-memory DB).
        driver: Registered driver name; defaults to ``LITECRUD_DRIVER``.

    Returns:
        A connected :class:`Database`.

    Raises:
        ConfigurationError: If ``filename`` is empty or ``driver`` unknown.
        DatabaseConnectionError: If the engine cannot open the store.
    """
    db = Database(driver)
    db.connect(ConnectionConfig(filename=filename)).unwrap()
    return db
