"""Configurations for the database API (`_api/database`)."""

from typing import Any

from pydantic import Field

from arango_dal.config.base import RequestConfig, dump_body


class DatabaseOptions(RequestConfig, frozen=True):
    """Cluster defaults for collections created in the new database."""

    sharding: str | None = None
    """Either "" or "single"."""

    replication_factor: int | str | None = Field(default=None, alias="replicationFactor")
    """A number of copies, or "satellite"."""

    write_concern: int | None = Field(default=None, alias="writeConcern")


class DatabaseUser(RequestConfig, frozen=True):
    """A user granted access to the new database."""

    username: str
    password: str | None = Field(default=None, alias="passwd")
    active: bool | None = None
    extra: dict[str, Any] | None = None


class CreateDatabaseConfig(RequestConfig, frozen=True):
    """Create a database (`POST _api/database`)."""

    name: str
    options: DatabaseOptions | None = None
    users: list[DatabaseUser] | None = None

    def body(self) -> Any:
        return dump_body(self)
