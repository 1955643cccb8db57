"""Clause-level SQL builders.

Each class handles exactly one SQL clause.

Classes
-------
ColumnListBuilder   : ``SELECT <cols>`` projection
JoinClauseBuilder   : ``<type> JOIN … ON …``
AssignmentBuilder   : ``SET col = ?, …``
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from litecrud.compile.base import CompiledSQL, SQLCompiler
from litecrud.errors import ConditionError
from litecrud.schema.conditions import JoinDescriptor


class ColumnListBuilder:
    """Builds the projection list; no columns means ``*``."""

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    def build(self, columns: Sequence[str] | None) -> str:
        if not columns:
            return SQLCompiler.WILDCARD
        return ", ".join(
            col if col == SQLCompiler.WILDCARD else self._compiler.quote_reference(col)
            for col in columns
        )


class JoinClauseBuilder:
    """Builds the ``JOIN`` clauses for a select, in list order."""

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    def build(
        self, joins: Iterable[JoinDescriptor | Mapping[str, Any]] | None
    ) -> str:
        if not joins:
            return ""
        return " ".join(self.build_one(join) for join in joins)

    def build_one(self, join: JoinDescriptor | Mapping[str, Any]) -> str:
        """Render one descriptor as ``<type> JOIN <table> ON <left> = <right>``."""
        descriptor = self._coerce(join)
        ref = self._compiler.quote_reference
        return (
            f"{descriptor.type} JOIN {ref(descriptor.table)} "
            f"ON {ref(descriptor.on.left_field)} = {ref(descriptor.on.right_field)}"
        )

    @staticmethod
    def _coerce(join: JoinDescriptor | Mapping[str, Any]) -> JoinDescriptor:
        if isinstance(join, JoinDescriptor):
            return join
        try:
            return JoinDescriptor.model_validate(join)
        except PydanticValidationError as exc:
            raise ConditionError(f"Invalid join descriptor: {exc}") from exc


class AssignmentBuilder:
    """Builds ``SET`` assignments for an update.

    Raises:
        ConditionError: If ``changes`` is empty (``UPDATE … SET`` with no
            assignments is not valid SQL).
    """

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    def build(self, changes: Mapping[str, Any]) -> CompiledSQL:
        if not changes:
            raise ConditionError("Update requires at least one column to set.")
        ph = self._compiler.param_placeholder()
        assignments = [
            f"{self._compiler.quote_identifier(col)} = {ph}" for col in changes
        ]
        return CompiledSQL(
            sql=f"SET {', '.join(assignments)}",
            params=list(changes.values()),
        )
