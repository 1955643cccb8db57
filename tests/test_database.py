"""Unit tests for the Database facade, DriverFactory and settings."""
from __future__ import annotations

import pytest

import litecrud
from litecrud.database import Database
from litecrud.drivers.registry import DriverFactory
from litecrud.drivers.sqlite import SQLiteDriver
from litecrud.errors import ConfigurationError, NotConnectedError
from litecrud.settings import Settings, get_settings


def test_sqlite_driver_registered():
    assert "sqlite" in DriverFactory.registered_drivers()
    assert isinstance(DriverFactory.create("sqlite"), SQLiteDriver)
    assert SQLiteDriver.name == "sqlite"


def test_unknown_driver_fails_at_construction():
    with pytest.raises(ConfigurationError, match="Unsupported database type") as exc_info:
        Database("postgres")
    assert exc_info.value.key == "driver"


def test_default_driver_comes_from_settings(monkeypatch):
    monkeypatch.setenv("LITECRUD_DRIVER", "sqlite")
    get_settings.cache_clear()
    try:
        assert isinstance(Database().driver, SQLiteDriver)
    finally:
        get_settings.cache_clear()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LITECRUD_FILENAME", "env.db")
    monkeypatch.setenv("LITECRUD_LOG_LEVEL", "DEBUG")
    s = Settings()
    assert s.filename == "env.db"
    assert s.log_level == "DEBUG"
    assert s.driver == "sqlite"


def test_operations_before_connect_fail_in_envelope():
    db = Database()
    for result in (
        db.create_table({"name": "t", "columns": [{"name": "a", "type": "TEXT"}]}),
        db.insert("t", {"a": 1}),
        db.select("t"),
        db.update("t", {"a": 2}, {"a": 1}),
        db.delete("t", {"a": 1}),
        db.begin_transaction(),
    ):
        assert result.success is False
        assert isinstance(result.error, NotConnectedError)


def test_create_database_is_a_no_op_success():
    r = Database().create_database("main")
    assert r.success
    assert r.data == {"message": "Database main ready"}


def test_disconnect_is_idempotent():
    db = Database()
    assert db.disconnect().success
    assert db.disconnect().success


def test_context_manager_disconnects():
    with Database() as db:
        db.connect({"filename": ":memory:"}).unwrap()
        assert db.connected
    assert not db.connected


def test_connect_helper():
    with litecrud.connect(":memory:") as db:
        assert db.connected
        assert db.select("sqlite_master").success


def test_connect_helper_raises_on_missing_filename():
    with pytest.raises(ConfigurationError):
        litecrud.connect("")


class _RecordingDriver(SQLiteDriver):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    def select(self, table, columns=None, where=None, joins=None):
        self.calls.append(("select", table, columns, where, joins))
        return super().select(table, columns, where, joins)


def test_facade_passes_arguments_through():
    DriverFactory.register_class("recording", _RecordingDriver)
    try:
        db = Database("recording")
        joins = [{"table": "b", "on": {"leftField": "a.id", "rightField": "b.a_id"}}]
        db.select("a", ["id"], {"id": 1}, joins)
        assert db.driver.calls == [("select", "a", ["id"], {"id": 1}, joins)]
    finally:
        DriverFactory._drivers.pop("recording", None)


def test_driver_logs_lifecycle_events():
    from structlog.testing import capture_logs

    with capture_logs() as logs:
        with Database() as db:
            db.connect({"filename": ":memory:"}).unwrap()
            db.select("missing_table")
    events = [entry["event"] for entry in logs]
    assert "connected" in events
    assert "statement_failed" in events


def test_converters_exported_at_top_level():
    from litecrud.schema import converters

    for name in ("schema_from_sqlalchemy", "schemas_from_metadata", "schemas_from_engine"):
        assert name in litecrud.__all__
        assert getattr(litecrud, name) is getattr(converters, name)
