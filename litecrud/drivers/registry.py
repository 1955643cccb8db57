"""Driver registry (Open/Closed Principle).

Adding an engine means registering one ``DatabaseDriver`` subclass; the
:class:`~litecrud.database.Database` facade looks it up by name.

Usage::

    from litecrud.drivers.registry import DriverFactory

    @DriverFactory.register("duckdb")
    class DuckDBDriver(DatabaseDriver):
        ...
"""
from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from litecrud.drivers.base import DatabaseDriver
from litecrud.errors import ConfigurationError


class DriverFactory:
    """Registry mapping driver names to :class:`DatabaseDriver` classes.

    Example::

        @DriverFactory.register("sqlite")
        class SQLiteDriver(DatabaseDriver):
            ...

        driver = DriverFactory.create("sqlite")
    """

    _drivers: ClassVar[dict[str, type[DatabaseDriver]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[DatabaseDriver]], type[DatabaseDriver]]:
        """Decorator that registers a driver class under ``name``.

        Args:
            name: The driver name (e.g. ``"sqlite"``).

        Returns:
            A decorator that registers and returns the driver class.
        """

        def decorator(driver_cls: type[DatabaseDriver]) -> type[DatabaseDriver]:
            cls.register_class(name, driver_cls)
            return driver_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, driver_cls: type[DatabaseDriver]) -> None:
        """Register a driver class without using the decorator form."""
        driver_cls.name = name
        cls._drivers[name] = driver_cls

    @classmethod
    def create(cls, name: str) -> DatabaseDriver:
        """Instantiate the driver registered for ``name``.

        Args:
            name: The driver name.

        Returns:
            A fresh, disconnected :class:`DatabaseDriver`.

        Raises:
            ConfigurationError: If no driver is registered for ``name``.
        """
        driver_cls = cls._drivers.get(name)
        if driver_cls is None:
            raise ConfigurationError(
                f"Unsupported database type: '{name}'. "
                f"Registered drivers: {cls.registered_drivers()}.",
                key="driver",
            )
        return driver_cls()

    @classmethod
    def registered_drivers(cls) -> list[str]:
        """Return the sorted list of registered driver names."""
        return sorted(cls._drivers)
