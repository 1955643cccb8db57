"""Utilities for building TableSchema objects from SQLAlchemy metadata.

Install the optional dependency before using this module::

    pip install "litecrud[sqlalchemy]"

Example::

    from sqlalchemy import Column, Integer, MetaData, String, Table
    from litecrud.schema.converters import schema_from_sqlalchemy

    users = Table(
        "users", MetaData(),
        Column("id", Integer, primary_key=True),
        Column("username", String(50), nullable=False, unique=True),
        sqlite_autoincrement=True,
    )
    db.create_table(schema_from_sqlalchemy(users))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from litecrud.errors import SchemaError
from litecrud.schema.table import ColumnDefinition, SQLExpression, TableSchema

if TYPE_CHECKING:
    from sqlalchemy import Column, Engine, MetaData, Table


def schema_from_sqlalchemy(table: Table) -> TableSchema:
    """Convert a SQLAlchemy Core :class:`~sqlalchemy.schema.Table`.

    Types are rendered for the SQLite dialect.  ``AUTOINCREMENT`` is set on
    the integer primary key of tables declared with
    ``sqlite_autoincrement=True``.  Scalar client-side defaults and server
    defaults are carried over; callable defaults are dropped.

    Args:
        table: The table to convert.

    Returns:
        The equivalent :class:`TableSchema`.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        SchemaError: If the table has a composite primary key, which a
            column-level ``PRIMARY KEY`` cannot express.
    """
    try:
        from sqlalchemy.dialects import sqlite as _sqlite
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for schema_from_sqlalchemy(). "
            'Install it with: pip install "litecrud[sqlalchemy]"'
        ) from exc

    pk_columns = list(table.primary_key.columns)
    if len(pk_columns) > 1:
        raise SchemaError(
            f"Table '{table.name}' has a composite primary key.",
            details={"table": table.name, "columns": [c.name for c in pk_columns]},
        )

    dialect = _sqlite.dialect()
    autoincrement = bool(table.kwargs.get("sqlite_autoincrement"))
    unique_cols = _single_column_unique(table)

    columns = [
        ColumnDefinition(
            name=col.name,
            type=str(col.type.compile(dialect=dialect)),
            primary_key=col.primary_key,
            auto_increment=autoincrement and col.primary_key and _is_integer(col),
            # Reflected columns may leave nullable unset; treat that as nullable.
            nullable=col.nullable is not False or col.primary_key,
            unique=bool(col.unique) or col.name in unique_cols,
            **_default_kwargs(col),
        )
        for col in table.columns
    ]
    return TableSchema(name=table.name, columns=columns)


def schemas_from_metadata(
    metadata: MetaData,
    *,
    include_tables: list[str] | None = None,
) -> list[TableSchema]:
    """Convert every table in ``metadata``, parents before children.

    Args:
        metadata: Populated or reflected :class:`~sqlalchemy.schema.MetaData`.
        include_tables: Optional allowlist of table names.

    Returns:
        One :class:`TableSchema` per table, in dependency order.
    """
    return [
        schema_from_sqlalchemy(table)
        for table in metadata.sorted_tables
        if include_tables is None or table.name in include_tables
    ]


def schemas_from_engine(
    engine: Engine,
    *,
    include_tables: list[str] | None = None,
) -> list[TableSchema]:
    """Reflect ``engine`` and convert the resulting tables.

    Useful for copying an existing database's layout into a new SQLite file.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for schemas_from_engine(). "
            'Install it with: pip install "litecrud[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    with engine.connect() as conn:
        metadata.reflect(bind=conn, only=include_tables)
    return schemas_from_metadata(metadata)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_integer(col: Column) -> bool:
    try:
        return col.type.python_type is int
    except NotImplementedError:
        return False


def _single_column_unique(table: Table) -> set[str]:
    from sqlalchemy import UniqueConstraint

    names: set[str] = set()
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint) and len(constraint.columns) == 1:
            names.update(c.name for c in constraint.columns)
    return names


def _default_kwargs(col: Column) -> dict[str, Any]:
    """Return ``{"default": …}`` for defaults expressible in DDL, else ``{}``."""
    server_default = col.server_default
    if server_default is not None and hasattr(server_default, "arg"):
        arg = server_default.arg
        if isinstance(arg, str):
            return {"default": arg}
        return {"default": SQLExpression(str(arg))}

    default = col.default
    if default is not None and getattr(default, "is_scalar", False):
        return {"default": default.arg}
    return {}
