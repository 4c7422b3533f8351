"""AQL cursor API (`_api/cursor`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from arango_dal.models.cursor import CursorMeta
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import CURSOR_STATUS_KINDS, HttpVerb, empty_decoder, json_decoder

if TYPE_CHECKING:
    from arango_dal.config.cursor import CreateCursorConfig, DeleteCursorConfig, NextCursorConfig
    from arango_dal.either import ArangoEither

BASE_SUFFIX = "_api/cursor"


class CursorApi(ResourceApi):
    """Run AQL queries and page through their results.

    Failures of these calls are reported with `ErrorKind.CURSOR`, including
    an unknown or expired cursor id.
    """

    __slots__: ClassVar[tuple[()]] = ()

    async def create(
        self, config: CreateCursorConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[CursorMeta[Any]]:
        """Run a query and return its first batch."""
        return await self._call(
            HttpVerb.POST,
            config,
            BASE_SUFFIX,
            json_decoder(CursorMeta[doc_type], CURSOR_STATUS_KINDS),
        )

    async def next(
        self, config: NextCursorConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[CursorMeta[Any]]:
        """Fetch the next batch of an open cursor."""
        return await self._call(
            HttpVerb.PUT,
            config,
            BASE_SUFFIX,
            json_decoder(CursorMeta[doc_type], CURSOR_STATUS_KINDS),
        )

    async def delete(self, config: DeleteCursorConfig) -> ArangoEither[None]:
        """Release a cursor before it is exhausted."""
        return await self._call(
            HttpVerb.DELETE, config, BASE_SUFFIX, empty_decoder(CURSOR_STATUS_KINDS)
        )
