import asyncio
import json
from typing import Any

import pytest
from conftest import MockServer, arango_error, connect

from arango_dal import DalError, ErrorKind, Graph
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
    FromTo,
    GraphDefinition,
    ReadEdgeDefsConfig,
    ReadGraphConfig,
    ReadVertexCollsConfig,
    ReadVertexConfig,
    ReplaceEdgeDefConfig,
    ReplaceVertexConfig,
    UpdateVertexConfig,
)
from arango_dal.models.graph import EdgeDefinition

PATH = "/_db/test/_api/gharial"
KNOWS = {"collection": "knows", "from": ["people"], "to": ["people"]}
GRAPH = {
    "_id": "_graphs/social",
    "_key": "social",
    "_rev": "_g1",
    "name": "social",
    "edgeDefinitions": [KNOWS],
    "orphanCollections": [],
}
HANDLE = {"_id": "knows/k", "_key": "k", "_rev": "_e1"}
VERTEX = {"_id": "people/a", "_key": "a", "_rev": "_v1"}


def envelope(code: int = 200, **fields: Any) -> dict[str, Any]:
    return {"error": False, "code": code, **fields}


def run(server: MockServer, call: Any) -> Any:
    async def scenario():
        conn = await connect(server)
        return await call(conn)

    return asyncio.run(scenario())


def knows() -> EdgeDefinition:
    return EdgeDefinition(collection="knows", from_=["people"], to=["people"])


def test_graph_api_satisfies_protocol(server: MockServer):
    conn = asyncio.run(connect(server))
    assert isinstance(conn.graph, Graph)


def test_graph_lifecycle(server: MockServer):
    server.mount("GET", PATH, json=envelope(graphs=[GRAPH]))
    server.mount("POST", PATH, status=202, json=envelope(202, graph=GRAPH))
    server.mount("GET", f"{PATH}/social", json=envelope(graph=GRAPH))
    server.mount("DELETE", f"{PATH}/social", status=202, json=envelope(202, removed=True))

    async def scenario(conn):
        graph = GraphDefinition(name="social", edge_definitions=[knows()])
        return (
            await conn.graph.list(),
            await conn.graph.create(CreateGraphConfig(graph=graph)),
            await conn.graph.read(ReadGraphConfig(name="social")),
            await conn.graph.delete(DeleteGraphConfig(name="social", drop_collections=True)),
        )

    listed, created, read, deleted = run(server, scenario)
    assert listed.unwrap_right().graphs[0].name == "social"
    info = created.unwrap_right().graph
    assert info.edge_definitions == [knows()]
    assert info.orphan_collections == []
    assert read.unwrap_right().graph.key == "social"
    assert deleted.unwrap_right().removed is True
    assert server.last.url.query == b"dropCollections=true"


def test_edge_definitions(server: MockServer):
    server.mount("GET", f"{PATH}/social/edge", json=envelope(collections=["knows"]))
    server.mount("POST", f"{PATH}/social/edge", status=202, json=envelope(202, graph=GRAPH))
    server.mount("PUT", f"{PATH}/social/edge/knows", status=202, json=envelope(202, graph=GRAPH))
    server.mount(
        "DELETE", f"{PATH}/social/edge/knows", status=202, json=envelope(202, graph=GRAPH)
    )

    async def scenario(conn):
        return (
            await conn.graph.read_edge_defs(ReadEdgeDefsConfig(graph="social")),
            await conn.graph.create_edge_def(CreateEdgeDefConfig(graph="social", edge_def=knows())),
            await conn.graph.replace_edge_def(
                ReplaceEdgeDefConfig(graph="social", edge_def=knows(), drop_collections=False)
            ),
            await conn.graph.delete_edge_def(
                DeleteEdgeDefConfig(graph="social", collection="knows", wait_for_sync=True)
            ),
        )

    read, created, replaced, deleted = run(server, scenario)
    assert read.unwrap_right().collections == ["knows"]
    assert created.unwrap_right().graph.name == "social"
    assert replaced.unwrap_right().code == 202
    assert deleted.unwrap_right().error is False
    create_request = server.requests[2]
    assert create_request.method == "POST"
    assert create_request.content.count(b'"from"') == 1
    assert server.requests[3].url.query == b"dropCollections=false"
    assert server.last.url.query == b"waitForSync=true"


def test_edges(server: MockServer):
    base = f"{PATH}/social/edge/knows"
    new_edge = {**HANDLE, "_from": "people/a", "_to": "people/b"}
    server.mount("POST", base, status=202, json=envelope(202, edge=HANDLE, new=new_edge))
    server.mount("GET", f"{base}/k", json=envelope(edge=new_edge))
    server.mount(
        "PATCH",
        f"{base}/k",
        status=202,
        json=envelope(202, edge={**HANDLE, "_oldRev": "_e0"}, old=new_edge),
    )
    server.mount("PUT", f"{base}/k", status=202, json=envelope(202, edge=HANDLE))
    server.mount("DELETE", f"{base}/k", status=202, json=envelope(202, removed=True, old=new_edge))

    async def scenario(conn):
        api = conn.graph
        return (
            await api.create_edge(
                EdgeCreateConfig(
                    graph="social",
                    collection="knows",
                    mapping=FromTo(from_="people/a", to="people/b"),
                    return_new=True,
                )
            ),
            await api.read_edge(
                EdgeReadConfig(graph="social", collection="knows", key="k", rev="_e1")
            ),
            await api.update_edge(
                EdgeUpdateConfig(
                    graph="social", collection="knows", key="k", edge={"w": 1}, return_old=True
                )
            ),
            await api.replace_edge(
                EdgeReplaceConfig(
                    graph="social",
                    collection="knows",
                    key="k",
                    edge={"_from": "people/a", "_to": "people/c"},
                    if_match="_e1",
                )
            ),
            await api.delete_edge(
                EdgeDeleteConfig(graph="social", collection="knows", key="k", return_old=True)
            ),
        )

    created, read, updated, replaced, deleted = run(server, scenario)
    assert created.unwrap_right().new_doc["_to"] == "people/b"
    assert read.unwrap_right().edge["_from"] == "people/a"
    assert updated.unwrap_right().edge.old_rev == "_e0"
    assert updated.unwrap_right().old_doc["_to"] == "people/b"
    assert replaced.unwrap_right().new_doc is None
    assert deleted.unwrap_right().old["_key"] == "k"

    create_request, read_request, update_request, replace_request, delete_request = (
        server.requests[1:]
    )
    assert create_request.url.query == b"returnNew=true"
    assert read_request.headers["rev"] == "_e1"
    assert update_request.url.query == b"returnOld=true"
    assert replace_request.headers["if-match"] == "_e1"
    assert delete_request.url.query == b"returnOld=true"


def test_vertex_collections(server: MockServer):
    server.mount("GET", f"{PATH}/social/vertex", json=envelope(collections=["people"]))
    server.mount("POST", f"{PATH}/social/vertex", status=202, json=envelope(202, graph=GRAPH))
    server.mount(
        "DELETE", f"{PATH}/social/vertex/places", status=202, json=envelope(202, graph=GRAPH)
    )

    async def scenario(conn):
        return (
            await conn.graph.read_vertex_colls(ReadVertexCollsConfig(graph="social")),
            await conn.graph.create_vertex_coll(
                CreateVertexCollConfig(graph="social", collection="places")
            ),
            await conn.graph.delete_vertex_coll(
                DeleteVertexCollConfig(graph="social", collection="places", drop_collection=True)
            ),
        )

    read, created, deleted = run(server, scenario)
    assert read.unwrap_right().collections == ["people"]
    assert created.unwrap_right().graph.name == "social"
    assert deleted.unwrap_right().graph.name == "social"
    assert json.loads(server.requests[2].content) == {"collection": "places"}
    assert server.last.url.query == b"dropCollection=true"


def test_vertices(server: MockServer):
    base = f"{PATH}/social/vertex/people"
    stored = {**VERTEX, "name": "ada"}
    server.mount("POST", base, status=202, json=envelope(202, vertex=VERTEX, new=stored))
    server.mount("GET", f"{base}/a", json=envelope(vertex=stored))
    server.mount("PATCH", f"{base}/a", status=202, json=envelope(202, vertex=VERTEX))
    server.mount("PUT", f"{base}/a", status=202, json=envelope(202, vertex=VERTEX, old=stored))
    server.mount("DELETE", f"{base}/a", status=202, json=envelope(202, removed=True))

    async def scenario(conn):
        api = conn.graph
        key = {"graph": "social", "collection": "people", "key": "a"}
        return (
            await api.create_vertex(
                CreateVertexConfig(
                    graph="social", collection="people", vertex={"name": "ada"}, return_new=True
                )
            ),
            await api.read_vertex(ReadVertexConfig(**key, if_match="_v1")),
            await api.update_vertex(UpdateVertexConfig(**key, vertex={"age": 36}, keep_null=True)),
            await api.replace_vertex(
                ReplaceVertexConfig(**key, vertex={"name": "ada"}, return_old=True)
            ),
            await api.delete_vertex(DeleteVertexConfig(**key, wait_for_sync=True)),
        )

    created, read, updated, replaced, deleted = run(server, scenario)
    assert created.unwrap_right().new_doc["name"] == "ada"
    assert read.unwrap_right().vertex["name"] == "ada"
    assert updated.unwrap_right().vertex.key == "a"
    assert replaced.unwrap_right().old_doc["name"] == "ada"
    assert deleted.unwrap_right().old is None

    methods = [r.method for r in server.requests[1:]]
    assert methods == ["POST", "GET", "PATCH", "PUT", "DELETE"]
    assert server.requests[2].headers["if-match"] == "_v1"
    assert server.requests[3].url.query == b"keepNull=true"
    assert server.requests[4].url.query == b"returnOld=true"
    assert server.last.url.query == b"waitForSync=true"


def test_stale_vertex_revision(server: MockServer):
    server.mount(
        "PATCH",
        f"{PATH}/social/vertex/people/a",
        status=412,
        json=arango_error(412, 1200, "conflict, _rev values do not match"),
    )

    async def scenario(conn):
        await conn.graph.update_vertex(
            UpdateVertexConfig(
                graph="social", collection="people", key="a", vertex={}, if_match="_old"
            )
        )

    with pytest.raises(DalError) as exc_info:
        run(server, scenario)
    assert exc_info.value.kind is ErrorKind.PRECONDITION_FAILED


def test_missing_graph(server: MockServer):
    server.mount(
        "GET", f"{PATH}/nope", status=404, json=arango_error(404, 1924, "graph 'nope' not found")
    )
    with pytest.raises(DalError) as exc_info:
        run(server, lambda c: c.graph.read(ReadGraphConfig(name="nope")))
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
