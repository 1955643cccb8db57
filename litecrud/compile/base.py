"""Compiler abstractions: CompiledSQL and the SQLCompiler ABC.

The Template Method pattern (GoF) is used:
- ``SQLCompiler`` defines the dialect hooks every builder relies on.
- ``SQLiteCompiler`` overrides them for SQLite (``?`` placeholders,
  double-quoted identifiers).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompiledSQL:
    """The output of a successful compilation.

    Attributes:
        sql: SQL text (or a fragment of it) with positional placeholders.
        params: Values for the placeholders, in placeholder order.
    """

    sql: str = ""
    params: list[Any] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.sql)

    def extend(self, other: CompiledSQL, sep: str = "") -> CompiledSQL:
        """Return a new fragment with ``other`` appended after ``sep``.

        Args:
            other: Fragment to append.  Empty fragments are skipped.
            sep: Separator placed between the two SQL strings.

        Returns:
            A new :class:`CompiledSQL`; neither operand is modified.
        """
        if not other:
            return CompiledSQL(self.sql, list(self.params))
        return CompiledSQL(
            sql=f"{self.sql}{sep}{other.sql}",
            params=[*self.params, *other.params],
        )


class SQLCompiler(ABC):
    """Abstract base for dialect-specific SQL compilers.

    Builders never hard-code quoting or placeholder syntax; they ask the
    injected compiler (Strategy pattern).
    """

    #: Identifiers emitted without quoting (column wildcards).
    WILDCARD = "*"

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'sqlite'``)."""

    @abstractmethod
    def param_placeholder(self) -> str:
        """Return the positional placeholder for one bound parameter."""

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return a properly-quoted, escaped SQL identifier.

        Args:
            name: A single unquoted identifier (no qualifier).

        Returns:
            Quoted identifier.
        """

    def placeholders(self, count: int) -> str:
        """Return ``count`` comma-separated placeholders."""
        return ", ".join(self.param_placeholder() for _ in range(count))

    def quote_reference(self, ref: str) -> str:
        """Quote a possibly qualified reference such as ``users.id``.

        Each dot-separated part is quoted on its own, so ``users.id`` becomes
        ``"users"."id"``.  A trailing ``*`` part is kept as a wildcard.

        Args:
            ref: Table, column, or ``table.column`` reference.

        Returns:
            SQL-safe reference.
        """
        parts = ref.split(".")
        quoted = [
            part if part == self.WILDCARD and i == len(parts) - 1
            else self.quote_identifier(part)
            for i, part in enumerate(parts)
        ]
        return ".".join(quoted)
