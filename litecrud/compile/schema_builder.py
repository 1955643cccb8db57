"""TableSchema → ``CREATE TABLE IF NOT EXISTS`` compiler.

Column constraints are appended in a fixed order::

    "<name>" <type> [PRIMARY KEY] [AUTOINCREMENT] [NOT NULL] [UNIQUE] [DEFAULT <expr>]

Re-running the statement against an existing table is a no-op in the
engine, even when the column set differs.  No migration is attempted.
"""
from __future__ import annotations

from typing import Any

from litecrud.compile.base import SQLCompiler
from litecrud.schema.table import ColumnDefinition, SQLExpression, TableSchema

#: Keyword defaults emitted verbatim (compared case-insensitively).
SQL_KEYWORD_DEFAULTS: frozenset[str] = frozenset({
    "CURRENT_TIMESTAMP",
    "CURRENT_DATE",
    "CURRENT_TIME",
    "NULL",
    "TRUE",
    "FALSE",
})


def _is_quoted_literal(text: str) -> bool:
    """Return True if ``text`` is one complete single-quoted SQL literal."""
    if len(text) < 2 or text[0] != "'" or text[-1] != "'":
        return False
    return "'" not in text[1:-1].replace("''", "")


def render_default(value: Any) -> str:
    """Render a column default as SQL.

    DDL cannot take bound parameters, so defaults are rendered inline:

    - ``None`` → ``NULL``; ``bool`` → ``1`` / ``0``; numbers as-is.
    - :class:`~litecrud.schema.table.SQLExpression`, keyword defaults such as
      ``CURRENT_TIMESTAMP``, and parenthesised expressions ``(…)`` verbatim.
    - Strings that are already a complete single-quoted SQL literal, such as
      ``'it''s'``, verbatim.
    - Any other value becomes a single-quoted string literal with embedded
      quotes doubled.

    Args:
        value: The ``default`` of a :class:`ColumnDefinition`.

    Returns:
        SQL text for the ``DEFAULT`` clause.
    """
    if value is None:
        return "NULL"
    if isinstance(value, SQLExpression):
        return str(value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value)
    stripped = text.strip()
    if stripped.upper() in SQL_KEYWORD_DEFAULTS:
        return stripped.upper()
    if stripped.startswith("(") and stripped.endswith(")"):
        return stripped
    if _is_quoted_literal(stripped):
        return stripped
    escaped = text.replace("'", "''")
    return f"'{escaped}'"


class CreateTableBuilder:
    """Builds a ``CREATE TABLE IF NOT EXISTS`` statement.

    Args:
        compiler: Dialect-specific compiler instance.
    """

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    def build(self, schema: TableSchema) -> str:
        columns = ", ".join(self.build_column(col) for col in schema.columns)
        table = self._compiler.quote_reference(schema.name)
        return f"CREATE TABLE IF NOT EXISTS {table} ({columns})"

    def build_column(self, col: ColumnDefinition) -> str:
        parts = [f"{self._compiler.quote_identifier(col.name)} {col.type}"]
        if col.primary_key:
            parts.append("PRIMARY KEY")
        if col.auto_increment:
            parts.append("AUTOINCREMENT")
        if not col.nullable:
            parts.append("NOT NULL")
        if col.unique:
            parts.append("UNIQUE")
        if col.has_default:
            parts.append(f"DEFAULT {render_default(col.default)}")
        return " ".join(parts)
