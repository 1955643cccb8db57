"""litecrud compilation layer: structured calls → parameterized SQL."""
from litecrud.compile.base import CompiledSQL, SQLCompiler
from litecrud.compile.builder import StatementBuilder
from litecrud.compile.clause_builders import (
    AssignmentBuilder,
    ColumnListBuilder,
    JoinClauseBuilder,
)
from litecrud.compile.condition_builder import ConditionBuilder
from litecrud.compile.schema_builder import CreateTableBuilder, render_default
from litecrud.compile.sqlite import SQLiteCompiler

__all__ = [
    "CompiledSQL",
    "SQLCompiler",
    "StatementBuilder",
    "AssignmentBuilder",
    "ColumnListBuilder",
    "JoinClauseBuilder",
    "ConditionBuilder",
    "CreateTableBuilder",
    "render_default",
    "SQLiteCompiler",
]
