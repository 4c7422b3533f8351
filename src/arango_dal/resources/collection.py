"""Collection API (`_api/collection`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from arango_dal.models.coll import (
    Checksum,
    CollectionMeta,
    Collections,
    Count,
    Drop,
    Figures,
    Load,
    Outcome,
    Properties,
    Revision,
)
from arango_dal.query import QueryParam, Suffix
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import HttpVerb, json_decoder

if TYPE_CHECKING:
    from arango_dal.config.coll import CollectionProps, CreateCollectionConfig
    from arango_dal.either import ArangoEither

BASE_SUFFIX = "_api/collection"


class CollectionApi(ResourceApi):
    """Operations on collections of the connection's database."""

    __slots__: ClassVar[tuple[()]] = ()

    async def _get(self, suffix: Suffix, output_type: Any) -> ArangoEither[Any]:
        return await self._conn.request(
            HttpVerb.GET, self._conn.join(str(suffix)), decode=json_decoder(output_type)
        )

    async def _put(
        self, name: str, action: str, output_type: Any, body: Any = None
    ) -> ArangoEither[Any]:
        url = self._conn.join(str(Suffix(BASE_SUFFIX, name, action)))
        return await self._conn.request(
            HttpVerb.PUT, url, decode=json_decoder(output_type), body=body
        )

    async def collections(self, exclude_system: bool = True) -> ArangoEither[Collections]:
        suffix = Suffix(BASE_SUFFIX).flag(
            QueryParam.EXCLUDE_SYSTEM, exclude_system, omit_false=True
        )
        return await self._get(suffix, Collections)

    async def collection(self, name: str) -> ArangoEither[CollectionMeta]:
        return await self._get(Suffix(BASE_SUFFIX, name), CollectionMeta)

    async def create(self, config: CreateCollectionConfig) -> ArangoEither[Properties]:
        return await self._call(HttpVerb.POST, config, BASE_SUFFIX, json_decoder(Properties))

    async def drop(self, name: str, is_system: bool = False) -> ArangoEither[Drop]:
        """Drop a collection; system collections need `is_system`."""
        suffix = Suffix(BASE_SUFFIX, name).flag(QueryParam.IS_SYSTEM, is_system, omit_false=True)
        return await self._conn.request(
            HttpVerb.DELETE, self._conn.join(str(suffix)), decode=json_decoder(Drop)
        )

    async def checksum(
        self,
        name: str,
        with_revisions: bool = False,
        with_data: bool = False,
    ) -> ArangoEither[Checksum]:
        suffix = (
            Suffix(BASE_SUFFIX, name, "checksum")
            .flag(QueryParam.WITH_REVISIONS, with_revisions, omit_false=True)
            .flag(QueryParam.WITH_DATA, with_data, omit_false=True)
        )
        return await self._get(suffix, Checksum)

    async def count(self, name: str) -> ArangoEither[Count]:
        return await self._get(Suffix(BASE_SUFFIX, name, "count"), Count)

    async def figures(self, name: str) -> ArangoEither[Figures]:
        return await self._get(Suffix(BASE_SUFFIX, name, "figures"), Figures)

    async def revision(self, name: str) -> ArangoEither[Revision]:
        return await self._get(Suffix(BASE_SUFFIX, name, "revision"), Revision)

    async def load(self, name: str, include_count: bool = True) -> ArangoEither[Load]:
        return await self._put(name, "load", Load, body={"count": include_count})

    async def load_indexes(self, name: str) -> ArangoEither[Outcome]:
        """Load the collection's indexes into memory."""
        return await self._put(name, "loadIndexesIntoMemory", Outcome)

    async def modify_props(
        self, name: str, props: CollectionProps
    ) -> ArangoEither[Properties]:
        return await self._put(name, "properties", Properties, body=props.body())

    async def recalculate_count(self, name: str) -> ArangoEither[Outcome]:
        return await self._put(name, "recalculateCount", Outcome)

    async def rename(self, name: str, new_name: str) -> ArangoEither[CollectionMeta]:
        return await self._put(name, "rename", CollectionMeta, body={"name": new_name})

    async def truncate(self, name: str) -> ArangoEither[CollectionMeta]:
        """Remove every document, keeping indexes."""
        return await self._put(name, "truncate", CollectionMeta)

    async def unload(self, name: str) -> ArangoEither[CollectionMeta]:
        return await self._put(name, "unload", CollectionMeta)
