"""Driver abstractions: QueryResult, Transaction, and the DatabaseDriver ABC.

Every driver operation returns a :class:`QueryResult` instead of raising.
Callers check ``result.success`` (or call :meth:`QueryResult.unwrap` to
opt back into exceptions).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from litecrud.schema.conditions import JoinDescriptor
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.table import TableSchema


@dataclass
class QueryResult:
    """Uniform outcome envelope.

    Attributes:
        success: Whether the operation succeeded.
        data: Payload on success: rows for select, ``{"id": …}`` for insert,
            ``{"changes": …}`` for update/delete, a :class:`Transaction` for
            begin, ``{"message": …}`` for create-database.
        error: The failure, always a :class:`~litecrud.errors.LiteCrudError`.
    """

    success: bool
    data: Any = None
    error: Exception | None = None

    @classmethod
    def ok(cls, data: Any = None) -> QueryResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Exception) -> QueryResult:
        return cls(success=False, error=error)

    def unwrap(self) -> Any:
        """Return ``data`` on success, otherwise raise the carried error."""
        if not self.success:
            raise self.error or RuntimeError("Operation failed without an error")
        return self.data


class Transaction(ABC):
    """A transaction bound to its driver's single connection.

    Exactly one of :meth:`commit` / :meth:`rollback` succeeds, once.
    """

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until commit or rollback has succeeded."""

    @abstractmethod
    def commit(self) -> QueryResult:
        """Commit the transaction."""

    @abstractmethod
    def rollback(self) -> QueryResult:
        """Roll the transaction back."""


class DatabaseDriver(ABC):
    """Abstract base for engine drivers.

    A driver owns at most one connection.  The lifecycle is
    ``disconnected → connected → disconnected``.
    """

    #: Name under which the driver is registered.
    name: str = ""

    @property
    @abstractmethod
    def connected(self) -> bool:
        """True between a successful connect and disconnect."""

    @abstractmethod
    def connect(
        self, config: ConnectionConfig | Mapping[str, Any] | None = None
    ) -> QueryResult:
        """Open the store described by ``config``."""

    @abstractmethod
    def disconnect(self) -> QueryResult:
        """Release the connection.  Succeeds when already disconnected."""

    @abstractmethod
    def create_database(self, name: str) -> QueryResult:
        """Create (or acknowledge) a database named ``name``."""

    @abstractmethod
    def create_table(self, schema: TableSchema | Mapping[str, Any]) -> QueryResult:
        """Create a table if it does not already exist."""

    @abstractmethod
    def begin_transaction(self) -> QueryResult:
        """Begin a transaction; ``data`` is the :class:`Transaction` handle."""

    @abstractmethod
    def insert(self, table: str, row: Mapping[str, Any]) -> QueryResult:
        """Insert one row; ``data`` is ``{"id": <new row id>}``."""

    @abstractmethod
    def select(
        self,
        table: str,
        columns: Sequence[str] | None = None,
        where: Mapping[str, Any] | None = None,
        joins: Iterable[JoinDescriptor | Mapping[str, Any]] | None = None,
    ) -> QueryResult:
        """Fetch matching rows; ``data`` is a list of dicts."""

    @abstractmethod
    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        where: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Update matching rows; ``data`` is ``{"changes": <count>}``."""

    @abstractmethod
    def delete(
        self, table: str, where: Mapping[str, Any] | None = None
    ) -> QueryResult:
        """Delete matching rows; ``data`` is ``{"changes": <count>}``."""

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Run a block inside a transaction.

        Commits when the block exits normally; rolls back and re-raises when
        it raises.  Failure to begin or commit raises the carried error.

        Example::

            with driver.transaction():
                driver.insert("users", {"username": "a"})
                driver.insert("users", {"username": "b"})
        """
        tx: Transaction = self.begin_transaction().unwrap()
        try:
            yield tx
        except BaseException:
            if tx.active:
                tx.rollback()
            raise
        if tx.active:
            tx.commit().unwrap()
