"""Condition and join models for select / update / delete.

A condition map is a plain ``dict`` keyed by field name.  Each value is
either a literal (equality) or an operator object::

    {
        "status": "active",                 # status = ?
        "age": {"gte": 18},                 # age >= ?
        "role": {"in": ["admin", "owner"]}, # role IN (?, ?)
        "created": {"between": [lo, hi]},   # created BETWEEN ? AND ?
        "deleted_at": {"isNull": True},     # deleted_at IS NULL
    }

Operator objects carry exactly one operator key.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

#: A per-field condition map.
Condition = dict[str, Any]


class ComparisonOp(str, Enum):
    """Binary operators, in the order they are looked up."""

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"


#: SQL keyword per comparison operator.  Insertion order is the scan order.
COMPARISON_SQL: dict[ComparisonOp, str] = {
    ComparisonOp.EQ: "=",
    ComparisonOp.NEQ: "!=",
    ComparisonOp.GT: ">",
    ComparisonOp.GTE: ">=",
    ComparisonOp.LT: "<",
    ComparisonOp.LTE: "<=",
    ComparisonOp.LIKE: "LIKE",
}

#: Every operator key, in scan order.
OPERATOR_KEYS: tuple[str, ...] = (
    *(op.value for op in ComparisonOp),
    "in",
    "between",
    "isNull",
)

# Operator keys whose model attribute name differs from the key.
_ATTR_NAMES: dict[str, str] = {"in": "in_", "isNull": "is_null"}


class FieldCondition(BaseModel):
    """An operator object for a single field.

    Only keys present in the input are considered set, so ``{"eq": None}``
    renders ``= ?`` bound to ``NULL`` (which, as in SQL, matches nothing;
    use ``isNull`` instead).

    Attributes:
        eq / neq / gt / gte / lt / lte / like: Binary operand.
        in_: Membership list (input key ``in``).
        between: Inclusive ``(low, high)`` bounds.
        is_null: ``True`` for ``IS NULL``, ``False`` for ``IS NOT NULL``
            (input key ``isNull`` or ``is_null``).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    eq: Any = None
    neq: Any = None
    gt: Any = None
    gte: Any = None
    lt: Any = None
    lte: Any = None
    like: Any = None
    in_: list[Any] | None = Field(default=None, alias="in")
    between: tuple[Any, Any] | None = None
    is_null: bool | None = Field(default=None, alias="isNull")

    @property
    def operators(self) -> list[str]:
        """Operator keys present on this object, in scan order."""
        present = self.model_fields_set
        return [
            key for key in OPERATOR_KEYS if _ATTR_NAMES.get(key, key) in present
        ]

    def operand(self, key: str) -> Any:
        """Return the operand stored under operator ``key``."""
        return getattr(self, _ATTR_NAMES.get(key, key))


class JoinOn(BaseModel):
    """Equality predicate of a join: ``left_field = right_field``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    left_field: str = Field(alias="leftField")
    right_field: str = Field(alias="rightField")


class JoinDescriptor(BaseModel):
    """A single ``<type> JOIN <table> ON <left> = <right>`` clause.

    Field references are not checked; an unknown column fails in the engine.

    Attributes:
        type: SQL join type.
        table: Table to join.
        on: Equality predicate.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["INNER", "LEFT", "RIGHT", "FULL"] = "INNER"
    table: str
    on: JoinOn
