"""Condition map → ``WHERE`` fragment compiler.

Each field contributes one predicate; predicates are joined with ``AND``.
Literal values become ``field = ?``.  Operator objects are rendered through
a fixed dispatch: the comparison table (``eq`` … ``like``) first, then
``in``, ``between`` and ``isNull``.

Every value is bound as a parameter.  Field names are quoted through the
injected :class:`~litecrud.compile.base.SQLCompiler`.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from litecrud.compile.base import CompiledSQL, SQLCompiler
from litecrud.errors import ConditionError
from litecrud.schema.conditions import COMPARISON_SQL, ComparisonOp, FieldCondition

# Operators whose operand shapes the SQL and so cannot be null.
_NON_NULL_OPERANDS = frozenset({"in", "between", "isNull"})


class ConditionBuilder:
    """Compiles a condition map to a ``WHERE`` fragment and its params.

    Args:
        compiler: Dialect-specific compiler instance.
    """

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, where: Mapping[str, Any] | None) -> CompiledSQL:
        """Compile ``where`` to `` WHERE …`` plus ordered params.

        Args:
            where: Condition map, or ``None``.

        Returns:
            An empty :class:`CompiledSQL` when there is nothing to filter on,
            otherwise the fragment with a leading space, e.g.
            ``' WHERE "age" >= ?'``.

        Raises:
            ConditionError: If an operator object is empty, unknown, or
                carries more than one operator, or if ``in``, ``between``
                or ``isNull`` is given a null operand.
        """
        if not where:
            return CompiledSQL()

        predicates: list[str] = []
        params: list[Any] = []
        for field, value in where.items():
            sql, values = self.build_predicate(field, value)
            predicates.append(sql)
            params.extend(values)

        return CompiledSQL(sql=f" WHERE {' AND '.join(predicates)}", params=params)

    def build_predicate(self, field: str, value: Any) -> tuple[str, list[Any]]:
        """Compile the predicate for a single field.

        Args:
            field: Column reference, optionally table-qualified.
            value: Literal or operator object.

        Returns:
            ``(sql, params)`` for this field alone.
        """
        column = self._compiler.quote_reference(field)
        if not isinstance(value, (Mapping, FieldCondition)):
            return f"{column} = {self._compiler.param_placeholder()}", [value]

        cond = value if isinstance(value, FieldCondition) else self._parse(field, value)
        self._check_single_operator(field, cond)
        op = cond.operators[0]
        operand = cond.operand(op)
        if operand is None and op in _NON_NULL_OPERANDS:
            raise ConditionError(
                f"Operator '{op}' on field '{field}' needs a value; got null.",
                field=field,
                operators=[op],
            )

        if op in COMPARISON_SQL:
            sql_op = COMPARISON_SQL[ComparisonOp(op)]
            return f"{column} {sql_op} {self._compiler.param_placeholder()}", [operand]

        if op == "in":
            items = list(operand)
            return f"{column} IN ({self._compiler.placeholders(len(items))})", items

        if op == "between":
            low, high = operand
            ph = self._compiler.param_placeholder()
            return f"{column} BETWEEN {ph} AND {ph}", [low, high]

        # isNull
        return f"{column} IS {'' if operand else 'NOT '}NULL", []

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _parse(field: str, value: Mapping[str, Any]) -> FieldCondition:
        try:
            cond = FieldCondition.model_validate(dict(value))
        except PydanticValidationError as exc:
            raise ConditionError(
                f"Invalid condition for field '{field}': {exc}",
                field=field,
                operators=[str(k) for k in value],
            ) from exc
        return cond

    @staticmethod
    def _check_single_operator(field: str, cond: FieldCondition) -> None:
        ops = cond.operators
        if not ops:
            raise ConditionError(
                f"Condition for field '{field}' has no operator.", field=field
            )
        if len(ops) > 1:
            raise ConditionError(
                f"Condition for field '{field}' combines operators {ops}; "
                "use one operator per field.",
                field=field,
                operators=ops,
            )
