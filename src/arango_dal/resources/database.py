"""Database API (`_api/database`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from arango_dal.models.common import Response
from arango_dal.models.db import Current
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import HttpVerb, json_decoder

if TYPE_CHECKING:
    from arango_dal.config.db import CreateDatabaseConfig
    from arango_dal.either import ArangoEither

BASE_SUFFIX = "_api/database"


class DatabaseApi(ResourceApi):
    """Operations on databases.

    `current` and `user` act on the connection's database; `list`, `create`
    and `drop` are always sent to the server root, as the server requires.
    """

    __slots__: ClassVar[tuple[()]] = ()

    async def current(self) -> ArangoEither[Response[Current]]:
        """Describe the connection's database."""
        url = self._conn.join(f"{BASE_SUFFIX}/current")
        return await self._conn.request(
            HttpVerb.GET, url, decode=json_decoder(Response[Current])
        )

    async def user(self) -> ArangoEither[Response[list[str]]]:
        """List the databases the current user can access."""
        url = self._conn.join(f"{BASE_SUFFIX}/user")
        return await self._conn.request(
            HttpVerb.GET, url, decode=json_decoder(Response[list[str]])
        )

    async def list(self) -> ArangoEither[Response[list[str]]]:
        """List every database; only allowed from `_system`."""
        url = self._conn.join(BASE_SUFFIX, root=True)
        return await self._conn.request(
            HttpVerb.GET, url, decode=json_decoder(Response[list[str]])
        )

    async def create(self, config: CreateDatabaseConfig) -> ArangoEither[Response[bool]]:
        url = self._conn.join(config.build_suffix(BASE_SUFFIX), root=True)
        return await self._conn.request(
            HttpVerb.POST, url, decode=json_decoder(Response[bool]), body=config.body()
        )

    async def drop(self, name: str) -> ArangoEither[Response[bool]]:
        url = self._conn.join(f"{BASE_SUFFIX}/{name}", root=True)
        return await self._conn.request(
            HttpVerb.DELETE, url, decode=json_decoder(Response[bool])
        )
