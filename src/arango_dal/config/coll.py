"""Configurations for the collection API (`_api/collection`)."""

from enum import IntEnum, StrEnum
from typing import Any

from pydantic import Field, PositiveInt

from arango_dal.config.base import RequestConfig, dump_body


class CollectionKind(IntEnum):
    """Wire value of a collection's `type`."""

    DOCUMENT = 2
    EDGE = 3


class KeyGenerator(StrEnum):
    TRADITIONAL = "traditional"
    AUTOINCREMENT = "autoincrement"
    UUID = "uuid"
    PADDED = "padded"


class KeyOptions(RequestConfig, frozen=True):
    """How document keys are generated."""

    kind: KeyGenerator | None = Field(default=None, alias="type")
    allow_user_keys: bool | None = Field(default=None, alias="allowUserKeys")
    increment: PositiveInt | None = None
    """Step size, autoincrement only."""

    offset: int | None = None
    """Initial value, autoincrement only."""


class CollectionProps(RequestConfig, frozen=True):
    """Properties that can be changed on an existing collection."""

    wait_for_sync: bool | None = Field(default=None, alias="waitForSync")
    journal_size: PositiveInt | None = Field(default=None, alias="journalSize")
    collection_schema: dict[str, Any] | None = Field(default=None, alias="schema")
    """JSON schema rule (`rule`, `level`, `message`)."""

    cache_enabled: bool | None = Field(default=None, alias="cacheEnabled")
    replication_factor: int | str | None = Field(default=None, alias="replicationFactor")
    write_concern: int | None = Field(default=None, alias="writeConcern")

    def body(self) -> Any:
        return dump_body(self)


class CreateCollectionConfig(CollectionProps, frozen=True):
    """Create a collection (`POST _api/collection`)."""

    name: str
    kind: CollectionKind | None = Field(default=None, alias="type")
    is_system: bool | None = Field(default=None, alias="isSystem")
    is_volatile: bool | None = Field(default=None, alias="isVolatile")
    do_compact: bool | None = Field(default=None, alias="doCompact")
    key_options: KeyOptions | None = Field(default=None, alias="keyOptions")
    number_of_shards: PositiveInt | None = Field(default=None, alias="numberOfShards")
    shard_keys: list[str] | None = Field(default=None, alias="shardKeys")
    sharding_strategy: str | None = Field(default=None, alias="shardingStrategy")
    distribute_shards_like: str | None = Field(default=None, alias="distributeShardsLike")
    smart_join_attribute: str | None = Field(default=None, alias="smartJoinAttribute")
