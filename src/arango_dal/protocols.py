"""Core protocols for the ArangoDB resource APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from arango_dal.config import coll, cursor, db, doc, graph
    from arango_dal.either import ArangoEither
    from arango_dal.models.common import JobInfo

Cred_contra = TypeVar("Cred_contra", contravariant=True)
Params_contra = TypeVar("Params_contra", contravariant=True)


@runtime_checkable
class Provider(Protocol[Cred_contra, Params_contra]):
    """Protocol for connection lifecycle management."""

    @classmethod
    async def connect(cls, credentials: Cred_contra, params: Params_contra) -> Self:
        """Authenticate against the server."""
        ...

    async def disconnect(self) -> None:
        """Release the HTTP client."""
        ...


@runtime_checkable
class Database(Protocol):
    async def current(self) -> ArangoEither[Any]: ...

    async def user(self) -> ArangoEither[Any]: ...

    async def list(self) -> ArangoEither[Any]: ...

    async def create(self, config: db.CreateDatabaseConfig) -> ArangoEither[Any]: ...

    async def drop(self, name: str) -> ArangoEither[Any]: ...


@runtime_checkable
class Collection(Protocol):
    async def collections(self, exclude_system: bool = True) -> ArangoEither[Any]: ...

    async def collection(self, name: str) -> ArangoEither[Any]: ...

    async def create(self, config: coll.CreateCollectionConfig) -> ArangoEither[Any]: ...

    async def drop(self, name: str, is_system: bool = False) -> ArangoEither[Any]: ...

    async def checksum(
        self, name: str, with_revisions: bool = False, with_data: bool = False
    ) -> ArangoEither[Any]: ...

    async def count(self, name: str) -> ArangoEither[Any]: ...

    async def figures(self, name: str) -> ArangoEither[Any]: ...

    async def revision(self, name: str) -> ArangoEither[Any]: ...

    async def load(self, name: str, include_count: bool = True) -> ArangoEither[Any]: ...

    async def load_indexes(self, name: str) -> ArangoEither[Any]: ...

    async def modify_props(
        self, name: str, props: coll.CollectionProps
    ) -> ArangoEither[Any]: ...

    async def recalculate_count(self, name: str) -> ArangoEither[Any]: ...

    async def rename(self, name: str, new_name: str) -> ArangoEither[Any]: ...

    async def truncate(self, name: str) -> ArangoEither[Any]: ...

    async def unload(self, name: str) -> ArangoEither[Any]: ...


@runtime_checkable
class Document(Protocol):
    """Single and batch document operations.

    Batch variants answer with one `Either[ArangoError, T]` per element.
    """

    async def create(self, config: doc.CreateConfig, doc_type: Any = ...) -> ArangoEither[Any]: ...

    async def creates(
        self, config: doc.CreatesConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def read(self, config: doc.ReadConfig, doc_type: Any = ...) -> ArangoEither[Any]: ...

    async def reads(self, config: doc.ReadsConfig, doc_type: Any = ...) -> ArangoEither[Any]: ...

    async def replace(
        self, config: doc.ReplaceConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def replaces(
        self, config: doc.ReplacesConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def update(self, config: doc.UpdateConfig, doc_type: Any = ...) -> ArangoEither[Any]: ...

    async def updates(
        self, config: doc.UpdatesConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def delete(self, config: doc.DeleteConfig, doc_type: Any = ...) -> ArangoEither[Any]: ...

    async def deletes(
        self, config: doc.DeletesConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...


@runtime_checkable
class Cursor(Protocol):
    async def create(
        self, config: cursor.CreateCursorConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def next(
        self, config: cursor.NextCursorConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def delete(self, config: cursor.DeleteCursorConfig) -> ArangoEither[None]: ...


@runtime_checkable
class Graph(Protocol):
    async def list(self) -> ArangoEither[Any]: ...

    async def create(self, config: graph.CreateGraphConfig) -> ArangoEither[Any]: ...

    async def read(self, config: graph.ReadGraphConfig) -> ArangoEither[Any]: ...

    async def delete(self, config: graph.DeleteGraphConfig) -> ArangoEither[Any]: ...

    async def read_edge_defs(self, config: graph.ReadEdgeDefsConfig) -> ArangoEither[Any]: ...

    async def create_edge_def(self, config: graph.CreateEdgeDefConfig) -> ArangoEither[Any]: ...

    async def replace_edge_def(
        self, config: graph.ReplaceEdgeDefConfig
    ) -> ArangoEither[Any]: ...

    async def delete_edge_def(self, config: graph.DeleteEdgeDefConfig) -> ArangoEither[Any]: ...

    async def create_edge(
        self, config: graph.EdgeCreateConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def read_edge(
        self, config: graph.EdgeReadConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def update_edge(
        self, config: graph.EdgeUpdateConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def replace_edge(
        self, config: graph.EdgeReplaceConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def delete_edge(
        self, config: graph.EdgeDeleteConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def read_vertex_colls(
        self, config: graph.ReadVertexCollsConfig
    ) -> ArangoEither[Any]: ...

    async def create_vertex_coll(
        self, config: graph.CreateVertexCollConfig
    ) -> ArangoEither[Any]: ...

    async def delete_vertex_coll(
        self, config: graph.DeleteVertexCollConfig
    ) -> ArangoEither[Any]: ...

    async def create_vertex(
        self, config: graph.CreateVertexConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def read_vertex(
        self, config: graph.ReadVertexConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def update_vertex(
        self, config: graph.UpdateVertexConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def replace_vertex(
        self, config: graph.ReplaceVertexConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...

    async def delete_vertex(
        self, config: graph.DeleteVertexConfig, doc_type: Any = ...
    ) -> ArangoEither[Any]: ...


@runtime_checkable
class Job(Protocol):
    """Follow-up of requests the server queued as async jobs."""

    async def status(self, job: JobInfo | str) -> int: ...

    async def fetch(self, job: JobInfo | str, output_type: Any = ...) -> Any: ...

    async def fetch_doc_job(self, job: JobInfo | str, output_type: Any = ...) -> Any: ...

    async def jobs(self, kind: Any = ..., count: int | None = None) -> list[str]: ...

    async def cancel(self, job: JobInfo | str) -> bool: ...

    async def delete(self, target: Any, stamp: int | None = None) -> bool: ...
