"""Configurations for the named graph API (`_api/gharial`)."""

from typing import Any, Self

from pydantic import Field, model_validator

from arango_dal.config.base import (
    IF_MATCH,
    IF_NONE_MATCH,
    REV,
    RequestConfig,
    conditional_headers,
    dump_body,
)
from arango_dal.models.graph import EdgeDefinition
from arango_dal.query import QueryParam, Suffix

EMPTY_EDGE_DEFS_ERR = "edge_definitions cannot be empty!"


class GraphDefinition(RequestConfig, frozen=True):
    """The graph to create."""

    name: str
    edge_definitions: list[EdgeDefinition] = Field(alias="edgeDefinitions")
    orphan_collections: list[str] | None = Field(default=None, alias="orphanCollections")
    """Vertex collections that belong to no edge definition."""

    @model_validator(mode="after")
    def _check_edge_definitions(self) -> Self:
        if not self.edge_definitions:
            raise ValueError(EMPTY_EDGE_DEFS_ERR)
        return self


class CreateGraphConfig(RequestConfig, frozen=True):
    """Create a graph (`POST _api/gharial`)."""

    graph: GraphDefinition
    wait_for_sync: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base).flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync))

    def body(self) -> Any:
        return dump_body(self.graph)


class ReadGraphConfig(RequestConfig, frozen=True):
    """Read a graph (`GET _api/gharial/{name}`)."""

    name: str

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.name))


class DeleteGraphConfig(ReadGraphConfig, frozen=True):
    """Drop a graph (`DELETE _api/gharial/{name}`)."""

    drop_collections: bool | None = None
    """Also drop collections not used by other graphs."""

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.name)
        return str(suffix.flag(QueryParam.DROP_COLLECTIONS, self.drop_collections))


# Edge definitions


class ReadEdgeDefsConfig(RequestConfig, frozen=True):
    """List the edge collections of a graph (`GET _api/gharial/{graph}/edge`)."""

    graph: str

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.graph, "edge"))


class CreateEdgeDefConfig(ReadEdgeDefsConfig, frozen=True):
    """Add an edge definition (`POST _api/gharial/{graph}/edge`)."""

    edge_def: EdgeDefinition

    def body(self) -> Any:
        return dump_body(self.edge_def)


class ReplaceEdgeDefConfig(RequestConfig, frozen=True):
    """Replace an edge definition (`PUT _api/gharial/{graph}/edge/{collection}`)."""

    graph: str
    edge_def: EdgeDefinition
    wait_for_sync: bool | None = None
    drop_collections: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.graph, "edge", self.edge_def.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.DROP_COLLECTIONS, self.drop_collections)
        )

    def body(self) -> Any:
        return dump_body(self.edge_def)


class DeleteEdgeDefConfig(RequestConfig, frozen=True):
    """Remove an edge definition (`DELETE _api/gharial/{graph}/edge/{collection}`)."""

    graph: str
    collection: str
    wait_for_sync: bool | None = None
    drop_collections: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.graph, "edge", self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.DROP_COLLECTIONS, self.drop_collections)
        )


# Edges


class FromTo(RequestConfig, frozen=True):
    """Endpoints of an edge, as document handles."""

    from_: str = Field(alias="_from")
    to: str = Field(alias="_to")


class EdgeCreateConfig(RequestConfig, frozen=True):
    """Insert an edge (`POST _api/gharial/{graph}/edge/{collection}`)."""

    graph: str
    collection: str
    mapping: FromTo
    data: dict[str, Any] | None = None
    """Extra attributes stored on the edge."""

    wait_for_sync: bool | None = None
    return_new: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.graph, "edge", self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_NEW, self.return_new)
        )

    def body(self) -> Any:
        return {**(self.data or {}), **dump_body(self.mapping)}


class EdgeReadConfig(RequestConfig, frozen=True):
    """Read an edge (`GET _api/gharial/{graph}/edge/{collection}/{key}`).

    At most one precondition is sent, checked in the order `rev`,
    `if_match`, `if_none_match`.
    """

    graph: str
    collection: str
    key: str
    rev: str | None = None
    if_match: str | None = None
    if_none_match: str | None = None

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.graph, "edge", self.collection, self.key))

    def has_header(self) -> bool:
        return any(v is not None for v in (self.rev, self.if_match, self.if_none_match))

    def add_headers(self) -> dict[str, str] | None:
        return conditional_headers(
            self.has_header(),
            [(REV, self.rev), (IF_MATCH, self.if_match), (IF_NONE_MATCH, self.if_none_match)],
        )


class _ElementWrite(RequestConfig, frozen=True):
    """Shared shape of edge and vertex update, replace and delete."""

    graph: str
    collection: str
    key: str
    wait_for_sync: bool | None = None
    return_old: bool | None = None
    if_match: str | None = None

    def has_header(self) -> bool:
        return self.if_match is not None

    def add_headers(self) -> dict[str, str] | None:
        return conditional_headers(self.has_header(), [(IF_MATCH, self.if_match)])


class _ElementChange(_ElementWrite, frozen=True):
    keep_null: bool | None = None
    return_new: bool | None = None

    def _suffix(self, base: str, kind: str) -> str:
        return str(
            Suffix(base, self.graph, kind, self.collection, self.key)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.KEEP_NULL, self.keep_null)
            .flag(QueryParam.RETURN_OLD, self.return_old)
            .flag(QueryParam.RETURN_NEW, self.return_new)
        )


class _ElementDelete(_ElementWrite, frozen=True):
    def _suffix(self, base: str, kind: str) -> str:
        return str(
            Suffix(base, self.graph, kind, self.collection, self.key)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_OLD, self.return_old)
        )


class EdgeUpdateConfig(_ElementChange, frozen=True):
    """Partially update an edge (`PATCH _api/gharial/{graph}/edge/{collection}/{key}`)."""

    edge: dict[str, Any]

    def build_suffix(self, base: str) -> str:
        return self._suffix(base, "edge")

    def body(self) -> Any:
        return dump_body(self.edge)


class EdgeReplaceConfig(EdgeUpdateConfig, frozen=True):
    """Replace an edge (`PUT _api/gharial/{graph}/edge/{collection}/{key}`).

    The replacement must carry `_from` and `_to`.
    """


class EdgeDeleteConfig(_ElementDelete, frozen=True):
    """Remove an edge (`DELETE _api/gharial/{graph}/edge/{collection}/{key}`)."""

    def build_suffix(self, base: str) -> str:
        return self._suffix(base, "edge")


# Vertex collections


class ReadVertexCollsConfig(RequestConfig, frozen=True):
    """List the vertex collections of a graph (`GET _api/gharial/{graph}/vertex`)."""

    graph: str

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.graph, "vertex"))


class CreateVertexCollConfig(ReadVertexCollsConfig, frozen=True):
    """Add a vertex collection (`POST _api/gharial/{graph}/vertex`)."""

    collection: str

    def body(self) -> Any:
        return {"collection": self.collection}


class DeleteVertexCollConfig(RequestConfig, frozen=True):
    """Remove a vertex collection (`DELETE _api/gharial/{graph}/vertex/{collection}`)."""

    graph: str
    collection: str
    drop_collection: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.graph, "vertex", self.collection).flag(
                QueryParam.DROP_COLLECTION, self.drop_collection
            )
        )


# Vertices


class CreateVertexConfig(RequestConfig, frozen=True):
    """Insert a vertex (`POST _api/gharial/{graph}/vertex/{collection}`)."""

    graph: str
    collection: str
    vertex: Any
    wait_for_sync: bool | None = None
    return_new: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.graph, "vertex", self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_NEW, self.return_new)
        )

    def body(self) -> Any:
        return dump_body(self.vertex)


class ReadVertexConfig(RequestConfig, frozen=True):
    """Read a vertex (`GET _api/gharial/{graph}/vertex/{collection}/{key}`)."""

    graph: str
    collection: str
    key: str
    if_match: str | None = None
    if_none_match: str | None = None

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.graph, "vertex", self.collection, self.key))

    def has_header(self) -> bool:
        return self.if_match is not None or self.if_none_match is not None

    def add_headers(self) -> dict[str, str] | None:
        return conditional_headers(
            self.has_header(),
            [(IF_MATCH, self.if_match), (IF_NONE_MATCH, self.if_none_match)],
        )


class UpdateVertexConfig(_ElementChange, frozen=True):
    """Partially update a vertex (`PATCH _api/gharial/{graph}/vertex/{collection}/{key}`)."""

    vertex: Any

    def build_suffix(self, base: str) -> str:
        return self._suffix(base, "vertex")

    def body(self) -> Any:
        return dump_body(self.vertex)


class ReplaceVertexConfig(UpdateVertexConfig, frozen=True):
    """Replace a vertex (`PUT _api/gharial/{graph}/vertex/{collection}/{key}`)."""


class DeleteVertexConfig(_ElementDelete, frozen=True):
    """Remove a vertex (`DELETE _api/gharial/{graph}/vertex/{collection}/{key}`)."""

    def build_suffix(self, base: str) -> str:
        return self._suffix(base, "vertex")
