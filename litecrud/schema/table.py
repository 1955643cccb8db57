"""Pydantic models describing a table to create.

Schemas may be built directly or validated from plain dicts; both the
snake_case field names and the camelCase spellings (``primaryKey``,
``autoIncrement``) are accepted::

    TableSchema.model_validate({
        "name": "users",
        "columns": [
            {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True},
            {"name": "username", "type": "TEXT", "nullable": False, "unique": True},
            {"name": "created_at", "type": "DATETIME", "default": "CURRENT_TIMESTAMP"},
        ],
    })
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SQLExpression(str):
    """A raw SQL expression emitted verbatim as a column DEFAULT.

    Plain strings are rendered as quoted literals; wrap a string in
    ``SQLExpression`` to opt out of quoting, e.g.
    ``SQLExpression("(strftime('%s', 'now'))")``.
    """

    def __repr__(self) -> str:
        return f"SQLExpression({str.__repr__(self)})"


class ColumnDefinition(BaseModel):
    """A single column in a :class:`TableSchema`.

    Attributes:
        name: Column name.
        type: Engine type name (e.g. ``'INTEGER'``, ``'TEXT'``).
        primary_key: Emit ``PRIMARY KEY``.
        auto_increment: Emit ``AUTOINCREMENT``.  SQLite only accepts it on an
            ``INTEGER PRIMARY KEY`` column.
        nullable: ``False`` emits ``NOT NULL``.
        unique: Emit ``UNIQUE``.
        default: Column default.  Only emitted when explicitly set, so
            ``default=None`` yields ``DEFAULT NULL``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(min_length=1)
    type: str
    primary_key: bool = Field(default=False, alias="primaryKey")
    auto_increment: bool = Field(default=False, alias="autoIncrement")
    nullable: bool = True
    unique: bool = False
    default: Any = None

    @property
    def has_default(self) -> bool:
        """True when the caller supplied a ``default`` (even ``None``)."""
        return "default" in self.model_fields_set


class TableSchema(BaseModel):
    """A table name and its ordered column definitions.

    The table name is not validated here; it is quoted at compile time and
    anything the engine rejects surfaces as a failed result.

    Attributes:
        name: Table name.
        columns: Ordered column definitions.  Names must be unique.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    columns: list[ColumnDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_columns(self) -> TableSchema:
        seen: set[str] = set()
        for col in self.columns:
            if col.name in seen:
                raise ValueError(
                    f"Column '{col.name}' is defined more than once in table '{self.name}'."
                )
            seen.add(col.name)
        return self

    @property
    def column_names(self) -> list[str]:
        """Returns all column names for this table."""
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> ColumnDefinition | None:
        """Returns the ColumnDefinition for ``name``, or ``None``."""
        for col in self.columns:
            if col.name == name:
                return col
        return None
