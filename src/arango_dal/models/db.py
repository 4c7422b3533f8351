"""Payloads of the database API."""

from pydantic import BaseModel, Field


class Current(BaseModel, frozen=True, populate_by_name=True):
    """Information about the database a connection is bound to."""

    name: str
    id: str
    is_system: bool = Field(alias="isSystem")
    path: str
    sharding: str | None = None
    """Cluster only."""

    replication_factor: int | str | None = Field(default=None, alias="replicationFactor")
    """Cluster only."""

    write_concern: int | None = Field(default=None, alias="writeConcern")
    """Cluster only."""
