"""Payloads of the named graph API (`_api/gharial`)."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

N = TypeVar("N")
O = TypeVar("O")  # noqa: E741
T = TypeVar("T")


class EdgeDefinition(BaseModel, frozen=True, populate_by_name=True):
    """An edge collection and the vertex collections it may connect."""

    collection: str
    """Name of the edge collection."""

    from_: list[str] = Field(alias="from")
    """Vertex collections allowed as `_from`."""

    to: list[str]
    """Vertex collections allowed as `_to`."""


class GraphInfo(BaseModel, frozen=True, populate_by_name=True):
    """A stored named graph."""

    id: str = Field(alias="_id")
    key: str = Field(alias="_key")
    rev: str = Field(alias="_rev")
    name: str
    edge_definitions: list[EdgeDefinition] = Field(alias="edgeDefinitions")
    orphan_collections: list[str] = Field(default_factory=list, alias="orphanCollections")
    number_of_shards: int | None = Field(default=None, alias="numberOfShards")
    replication_factor: int | str | None = Field(default=None, alias="replicationFactor")
    is_smart: bool | None = Field(default=None, alias="isSmart")


class GraphList(BaseModel, frozen=True):
    error: bool
    code: int
    graphs: list[GraphInfo]


class GraphMeta(BaseModel, frozen=True):
    """Answer to graph create, read and edge definition changes."""

    error: bool
    code: int
    graph: GraphInfo


class GraphCollections(BaseModel, frozen=True):
    """Edge or vertex collection names of a graph."""

    error: bool
    code: int
    collections: list[str]


class Removed(BaseModel, Generic[O], frozen=True):
    """Answer to removing a graph, an edge or a vertex."""

    error: bool
    code: int
    removed: bool
    old: O | None = None
    """The removed element, when `returnOld` was requested."""


class ElementHandle(BaseModel, frozen=True, populate_by_name=True):
    """Identity of a written edge or vertex."""

    id: str = Field(alias="_id")
    key: str = Field(alias="_key")
    rev: str = Field(alias="_rev")
    old_rev: str | None = Field(default=None, alias="_oldRev")


class EdgeMeta(BaseModel, Generic[N, O], frozen=True, populate_by_name=True):
    """Answer to creating, updating or replacing an edge."""

    error: bool
    code: int
    edge: ElementHandle
    new_doc: N | None = Field(default=None, alias="new")
    old_doc: O | None = Field(default=None, alias="old")


class EdgeRead(BaseModel, Generic[T], frozen=True):
    error: bool
    code: int
    edge: T


class VertexMeta(BaseModel, Generic[N, O], frozen=True, populate_by_name=True):
    """Answer to creating, updating or replacing a vertex."""

    error: bool
    code: int
    vertex: ElementHandle
    new_doc: N | None = Field(default=None, alias="new")
    old_doc: O | None = Field(default=None, alias="old")


class VertexRead(BaseModel, Generic[T], frozen=True):
    error: bool
    code: int
    vertex: T
