"""Shared plumbing for resource APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from arango_dal.config.base import RequestConfig
    from arango_dal.connection import Connection
    from arango_dal.either import ArangoEither
    from arango_dal.wire import Decoder, HttpVerb


class ResourceApi:
    """Base for the per-API groups of operations exposed on a connection."""

    __slots__: ClassVar[tuple[str]] = ("_conn",)

    _conn: Connection

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    async def _call[T](
        self,
        verb: HttpVerb,
        config: RequestConfig,
        base: str,
        decode: Decoder[T],
    ) -> ArangoEither[T]:
        return await self._conn.request(
            verb,
            config.build_url(base, self._conn),
            decode=decode,
            headers=config.add_headers(),
            body=config.body(),
        )
