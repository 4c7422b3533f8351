"""Named graph API (`_api/gharial`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from arango_dal.models.graph import (
    EdgeMeta,
    EdgeRead,
    GraphCollections,
    GraphList,
    GraphMeta,
    Removed,
    VertexMeta,
    VertexRead,
)
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import DOCUMENT_STATUS_KINDS, HttpVerb, json_decoder

if TYPE_CHECKING:
    from arango_dal.config.graph import (
        CreateEdgeDefConfig,
        CreateGraphConfig,
        CreateVertexCollConfig,
        CreateVertexConfig,
        DeleteEdgeDefConfig,
        DeleteGraphConfig,
        DeleteVertexCollConfig,
        DeleteVertexConfig,
        EdgeCreateConfig,
        EdgeDeleteConfig,
        EdgeReadConfig,
        EdgeReplaceConfig,
        EdgeUpdateConfig,
        ReadEdgeDefsConfig,
        ReadGraphConfig,
        ReadVertexCollsConfig,
        ReadVertexConfig,
        ReplaceEdgeDefConfig,
        ReplaceVertexConfig,
        UpdateVertexConfig,
    )
    from arango_dal.either import ArangoEither

BASE_SUFFIX = "_api/gharial"


class GraphApi(ResourceApi):
    """Graphs, their edge definitions and vertex collections, edges and vertices."""

    __slots__: ClassVar[tuple[()]] = ()

    async def list(self) -> ArangoEither[GraphList]:
        url = self._conn.join(BASE_SUFFIX)
        return await self._conn.request(HttpVerb.GET, url, decode=json_decoder(GraphList))

    async def create(self, config: CreateGraphConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.POST, config, BASE_SUFFIX, json_decoder(GraphMeta))

    async def read(self, config: ReadGraphConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.GET, config, BASE_SUFFIX, json_decoder(GraphMeta))

    async def delete(self, config: DeleteGraphConfig) -> ArangoEither[Removed[Any]]:
        return await self._call(
            HttpVerb.DELETE, config, BASE_SUFFIX, json_decoder(Removed[Any])
        )

    # Edge definitions

    async def read_edge_defs(self, config: ReadEdgeDefsConfig) -> ArangoEither[GraphCollections]:
        """List the edge collections used by the graph."""
        return await self._call(
            HttpVerb.GET, config, BASE_SUFFIX, json_decoder(GraphCollections)
        )

    async def create_edge_def(self, config: CreateEdgeDefConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.POST, config, BASE_SUFFIX, json_decoder(GraphMeta))

    async def replace_edge_def(self, config: ReplaceEdgeDefConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.PUT, config, BASE_SUFFIX, json_decoder(GraphMeta))

    async def delete_edge_def(self, config: DeleteEdgeDefConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.DELETE, config, BASE_SUFFIX, json_decoder(GraphMeta))

    # Edges

    async def create_edge(
        self, config: EdgeCreateConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[EdgeMeta[Any, Any]]:
        return await self._call(
            HttpVerb.POST,
            config,
            BASE_SUFFIX,
            json_decoder(EdgeMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def read_edge(
        self, config: EdgeReadConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[EdgeRead[Any]]:
        return await self._call(
            HttpVerb.GET,
            config,
            BASE_SUFFIX,
            json_decoder(EdgeRead[doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def update_edge(
        self, config: EdgeUpdateConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[EdgeMeta[Any, Any]]:
        return await self._call(
            HttpVerb.PATCH,
            config,
            BASE_SUFFIX,
            json_decoder(EdgeMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def replace_edge(
        self, config: EdgeReplaceConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[EdgeMeta[Any, Any]]:
        return await self._call(
            HttpVerb.PUT,
            config,
            BASE_SUFFIX,
            json_decoder(EdgeMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def delete_edge(
        self, config: EdgeDeleteConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[Removed[Any]]:
        return await self._call(
            HttpVerb.DELETE,
            config,
            BASE_SUFFIX,
            json_decoder(Removed[doc_type], DOCUMENT_STATUS_KINDS),
        )

    # Vertex collections

    async def read_vertex_colls(
        self, config: ReadVertexCollsConfig
    ) -> ArangoEither[GraphCollections]:
        return await self._call(
            HttpVerb.GET, config, BASE_SUFFIX, json_decoder(GraphCollections)
        )

    async def create_vertex_coll(self, config: CreateVertexCollConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.POST, config, BASE_SUFFIX, json_decoder(GraphMeta))

    async def delete_vertex_coll(self, config: DeleteVertexCollConfig) -> ArangoEither[GraphMeta]:
        return await self._call(HttpVerb.DELETE, config, BASE_SUFFIX, json_decoder(GraphMeta))

    # Vertices

    async def create_vertex(
        self, config: CreateVertexConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[VertexMeta[Any, Any]]:
        return await self._call(
            HttpVerb.POST,
            config,
            BASE_SUFFIX,
            json_decoder(VertexMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def read_vertex(
        self, config: ReadVertexConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[VertexRead[Any]]:
        return await self._call(
            HttpVerb.GET,
            config,
            BASE_SUFFIX,
            json_decoder(VertexRead[doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def update_vertex(
        self, config: UpdateVertexConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[VertexMeta[Any, Any]]:
        return await self._call(
            HttpVerb.PATCH,
            config,
            BASE_SUFFIX,
            json_decoder(VertexMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def replace_vertex(
        self, config: ReplaceVertexConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[VertexMeta[Any, Any]]:
        return await self._call(
            HttpVerb.PUT,
            config,
            BASE_SUFFIX,
            json_decoder(VertexMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS),
        )

    async def delete_vertex(
        self, config: DeleteVertexConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[Removed[Any]]:
        return await self._call(
            HttpVerb.DELETE,
            config,
            BASE_SUFFIX,
            json_decoder(Removed[doc_type], DOCUMENT_STATUS_KINDS),
        )
