"""Payloads of the collection API."""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field

from arango_dal.config.coll import CollectionKind
from arango_dal.models.common import Acknowledged


class Status(IntEnum):
    NEW_BORN = 1
    UNLOADED = 2
    LOADED = 3
    UNLOADING = 4
    DELETED = 5
    LOADING = 6


class CollectionInfo(BaseModel, frozen=True, populate_by_name=True):
    """Summary of a collection, as listed by `_api/collection`."""

    id: str
    name: str
    status: Status | None = None
    kind: CollectionKind = Field(alias="type")
    is_system: bool = Field(alias="isSystem")
    globally_unique_id: str | None = Field(default=None, alias="globallyUniqueId")


class Collections(BaseModel, frozen=True):
    error: bool
    code: int
    result: list[CollectionInfo]


class CollectionMeta(CollectionInfo, frozen=True):
    """A single-collection answer with its response envelope."""

    error: bool
    code: int


class Properties(CollectionMeta, frozen=True):
    """Answer to create, property changes and rename."""

    wait_for_sync: bool | None = Field(default=None, alias="waitForSync")
    key_options: dict[str, Any] | None = Field(default=None, alias="keyOptions")
    collection_schema: dict[str, Any] | None = Field(default=None, alias="schema")
    cache_enabled: bool | None = Field(default=None, alias="cacheEnabled")
    write_concern: int | None = Field(default=None, alias="writeConcern")
    replication_factor: int | str | None = Field(default=None, alias="replicationFactor")
    number_of_shards: int | None = Field(default=None, alias="numberOfShards")
    shard_keys: list[str] | None = Field(default=None, alias="shardKeys")


class Checksum(CollectionMeta, frozen=True):
    checksum: str
    revision: str


class Count(CollectionMeta, frozen=True):
    count: int


class Figures(CollectionMeta, frozen=True):
    figures: dict[str, Any]
    """Storage-engine specific figures (`indexes`, `documentsSize`, ...)."""


class Revision(CollectionMeta, frozen=True):
    revision: str


class Load(CollectionMeta, frozen=True):
    count: int | None = None
    """Only present when the count was requested."""


class Drop(BaseModel, frozen=True):
    error: bool
    code: int
    id: str


class Outcome(Acknowledged, frozen=True):
    """Answer of loading indexes or recounting."""

    error: bool
    code: int
