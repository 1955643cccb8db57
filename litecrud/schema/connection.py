"""Connection parameters passed to ``connect()``."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ConnectionConfig(BaseModel):
    """Where and how to open the store.

    SQLite only reads ``filename`` (a path or ``':memory:'``).  The network
    fields are accepted so server-backed drivers can share the same config
    shape.

    Attributes:
        filename: Store location for embedded engines.
        host: Server host.
        port: Server port.
        username: Login name.
        password: Login secret.
        database: Database name on the server.
    """

    model_config = ConfigDict(extra="forbid")

    filename: str | None = None
    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)
    username: str | None = None
    password: SecretStr | None = None
    database: str | None = None
