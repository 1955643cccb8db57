"""SQLite dialect compiler."""
from __future__ import annotations

from litecrud.compile.base import SQLCompiler


class SQLiteCompiler(SQLCompiler):
    """Compiles to SQLite-flavoured parameterized SQL.

    Parameter style: ``?`` – Python's ``sqlite3`` ``qmark`` style, executed
    as ``cursor.execute(sql, params_list)``.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def param_placeholder(self) -> str:
        return "?"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'
