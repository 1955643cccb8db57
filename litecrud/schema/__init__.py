"""litecrud schema models: TableSchema, conditions, joins, ConnectionConfig."""
from litecrud.schema.conditions import (
    COMPARISON_SQL,
    OPERATOR_KEYS,
    ComparisonOp,
    Condition,
    FieldCondition,
    JoinDescriptor,
    JoinOn,
)
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.table import ColumnDefinition, SQLExpression, TableSchema

__all__ = [
    "COMPARISON_SQL",
    "OPERATOR_KEYS",
    "ComparisonOp",
    "Condition",
    "FieldCondition",
    "JoinDescriptor",
    "JoinOn",
    "ConnectionConfig",
    "ColumnDefinition",
    "SQLExpression",
    "TableSchema",
]
