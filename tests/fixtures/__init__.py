"""Test fixtures: sample table schemas and seed rows."""

from __future__ import annotations

from typing import Any

from litecrud.database import Database
from litecrud.schema.table import TableSchema


def users_schema() -> TableSchema:
    """``users(id INTEGER PRIMARY KEY AUTOINCREMENT, username TEXT NOT NULL UNIQUE, …)``."""
    return TableSchema.model_validate({
        "name": "users",
        "columns": [
            {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True},
            {"name": "username", "type": "TEXT", "nullable": False, "unique": True},
            {"name": "email", "type": "TEXT"},
            {"name": "age", "type": "INTEGER"},
            {"name": "status", "type": "TEXT", "default": "active"},
            {"name": "created_at", "type": "DATETIME", "default": "CURRENT_TIMESTAMP"},
        ],
    })


def posts_schema() -> TableSchema:
    """``posts`` referencing ``users.id`` through ``user_id``."""
    return TableSchema.model_validate({
        "name": "posts",
        "columns": [
            {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True},
            {"name": "user_id", "type": "INTEGER", "nullable": False},
            {"name": "title", "type": "TEXT", "nullable": False},
        ],
    })


USERS: list[dict[str, Any]] = [
    {"username": "alice", "email": "alice@example.com", "age": 31},
    {"username": "bob", "email": "bob@example.com", "age": 25},
    {"username": "carol", "email": None, "age": 42},
    {"username": "dave", "email": "dave@example.org", "age": 18},
]

POSTS: list[dict[str, Any]] = [
    {"user_id": 1, "title": "Hello"},
    {"user_id": 1, "title": "Second post"},
    {"user_id": 2, "title": "Bob's post"},
]


def seed(db: Database) -> None:
    """Create ``users`` and ``posts`` and insert the sample rows."""
    db.create_table(users_schema()).unwrap()
    db.create_table(posts_schema()).unwrap()
    for row in USERS:
        db.insert("users", row).unwrap()
    for row in POSTS:
        db.insert("posts", row).unwrap()
