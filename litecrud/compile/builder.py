"""Statement assembly: structured CRUD calls → parameterized SQL.

``StatementBuilder`` is the top-level orchestrator.  It wires together the
clause-level sub-builders and assembles complete statements.  All dialect
behaviour is delegated to the injected ``SQLCompiler``.

Sub-builder hierarchy
---------------------
StatementBuilder
  ├── CreateTableBuilder   (schema_builder.py)
  ├── ConditionBuilder     (condition_builder.py)
  ├── ColumnListBuilder    (clause_builders.py)
  ├── JoinClauseBuilder    (clause_builders.py)
  └── AssignmentBuilder    (clause_builders.py)

Parameter order always follows placeholder order in the SQL text; for an
update that means every ``SET`` value before every ``WHERE`` value.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from litecrud.compile.base import CompiledSQL, SQLCompiler
from litecrud.compile.clause_builders import (
    AssignmentBuilder,
    ColumnListBuilder,
    JoinClauseBuilder,
)
from litecrud.compile.condition_builder import ConditionBuilder
from litecrud.compile.schema_builder import CreateTableBuilder
from litecrud.schema.conditions import JoinDescriptor
from litecrud.schema.table import TableSchema


class StatementBuilder:
    """Compiles CRUD and DDL calls to SQL for one dialect.

    Args:
        compiler: Dialect-specific compiler instance.
    """

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler
        self._create = CreateTableBuilder(compiler)
        self._where = ConditionBuilder(compiler)
        self._columns = ColumnListBuilder(compiler)
        self._joins = JoinClauseBuilder(compiler)
        self._set = AssignmentBuilder(compiler)

    @property
    def compiler(self) -> SQLCompiler:
        return self._compiler

    # ------------------------------------------------------------------
    # DDL
    # ------------------------------------------------------------------

    def create_table(self, schema: TableSchema) -> CompiledSQL:
        return CompiledSQL(sql=self._create.build(schema))

    # ------------------------------------------------------------------
    # DML
    # ------------------------------------------------------------------

    def insert(self, table: str, row: Mapping[str, Any]) -> CompiledSQL:
        """``INSERT INTO t (cols) VALUES (?, …)``; an empty row inserts defaults."""
        target = self._compiler.quote_reference(table)
        if not row:
            return CompiledSQL(sql=f"INSERT INTO {target} DEFAULT VALUES")
        columns = ", ".join(self._compiler.quote_identifier(col) for col in row)
        placeholders = self._compiler.placeholders(len(row))
        return CompiledSQL(
            sql=f"INSERT INTO {target} ({columns}) VALUES ({placeholders})",
            params=list(row.values()),
        )

    def select(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        where: Mapping[str, Any] | None = None,
        joins: Iterable[JoinDescriptor | Mapping[str, Any]] | None = None,
    ) -> CompiledSQL:
        """``SELECT <cols> FROM t [JOIN …] [WHERE …]``."""
        sql = f"SELECT {self._columns.build(columns)} FROM {self._compiler.quote_reference(table)}"
        join_sql = self._joins.build(joins)
        if join_sql:
            sql = f"{sql} {join_sql}"
        return CompiledSQL(sql=sql).extend(self._where.build(where))

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        where: Mapping[str, Any] | None = None,
    ) -> CompiledSQL:
        """``UPDATE t SET … [WHERE …]``."""
        head = CompiledSQL(sql=f"UPDATE {self._compiler.quote_reference(table)}")
        return head.extend(self._set.build(changes), sep=" ").extend(
            self._where.build(where)
        )

    def delete(
        self,
        table: str,
        where: Mapping[str, Any] | None = None,
    ) -> CompiledSQL:
        """``DELETE FROM t [WHERE …]``."""
        head = CompiledSQL(sql=f"DELETE FROM {self._compiler.quote_reference(table)}")
        return head.extend(self._where.build(where))
