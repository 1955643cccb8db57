"""Walk through create / insert / select / update / delete against a SQLite file.

Usage::

    python -m examples.quickstart --db demo.db --log-level DEBUG
"""
from __future__ import annotations

import argparse

from litecrud import Database, setup_logging

USERS_SCHEMA = {
    "name": "users",
    "columns": [
        {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True},
        {"name": "username", "type": "TEXT", "nullable": False, "unique": True},
        {"name": "email", "type": "TEXT", "nullable": False},
        {"name": "created_at", "type": "DATETIME", "default": "CURRENT_TIMESTAMP"},
    ],
}


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--db", default=":memory:", help="SQLite file (default: in-memory)")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    setup_logging(args.log_level, "console")

    with Database("sqlite") as db:
        db.connect({"filename": args.db}).unwrap()
        db.create_table(USERS_SCHEMA).unwrap()

        print("Insert result:", db.insert("users", {"username": "testuser", "email": "test@example.com"}))
        print("Select result:", db.select("users", ["id", "username", "email"]))
        print(
            "Update result:",
            db.update("users", {"email": "updated@example.com"}, {"username": "testuser"}),
        )
        print(
            "Filtered select:",
            db.select("users", where={"email": {"like": "%@example.com"}}),
        )

        with db.transaction():
            db.insert("users", {"username": "second", "email": "second@example.com"}).unwrap()

        print("Duplicate insert:", db.insert("users", {"username": "testuser", "email": "x@y.z"}))
        print("Delete result:", db.delete("users", {"username": {"in": ["testuser", "second"]}}))


if __name__ == "__main__":
    main()
