"""litecrud drivers.  Importing this package registers the built-in drivers."""
from litecrud.drivers.base import DatabaseDriver, QueryResult, Transaction
from litecrud.drivers.registry import DriverFactory
from litecrud.drivers.sqlite import SQLiteDriver, SQLiteTransaction

__all__ = [
    "DatabaseDriver",
    "QueryResult",
    "Transaction",
    "DriverFactory",
    "SQLiteDriver",
    "SQLiteTransaction",
]
