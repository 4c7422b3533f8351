import asyncio
from typing import Any

import pytest
from conftest import MockServer, arango_error, connect
from pydantic import BaseModel

from arango_dal import DalError, Document, ErrorKind, Left, Right
from arango_dal.config.doc import (
    CreateConfig,
    CreatesConfig,
    DeleteConfig,
    DeletesConfig,
    OverwriteMode,
    ReadConfig,
    ReadsConfig,
    ReplaceConfig,
    ReplacesConfig,
    UpdateConfig,
    UpdatesConfig,
)
from arango_dal.models.doc import DocMeta

PATH = "/_db/test/_api/document/test_coll"
META = {"_key": "abc", "_id": "test_coll/abc", "_rev": "_rev1"}


def run(server: MockServer, call: Any) -> Any:
    async def scenario():
        conn = await connect(server)
        return await call(conn)

    return asyncio.run(scenario())


def test_document_api_satisfies_protocol(server: MockServer):
    conn = asyncio.run(connect(server))
    assert isinstance(conn.document, Document)


def test_plain_create_has_no_optional_fields(server: MockServer):
    server.mount("POST", PATH, status=201, json=META)
    result = run(
        server,
        lambda c: c.document.create(CreateConfig(collection="test_coll", document={"a": 1})),
    )
    meta = result.unwrap_right()
    assert isinstance(meta, DocMeta)
    assert (meta.key, meta.id, meta.rev) == ("abc", "test_coll/abc", "_rev1")
    assert meta.old_rev is None
    assert meta.new_doc is None
    assert meta.old_doc is None
    assert server.last_json() == {"a": 1}
    assert server.last.url.query == b""


def test_overwrite_create_reports_old_rev(server: MockServer):
    server.mount("POST", PATH, status=201, json={**META, "_oldRev": "_rev0"})
    result = run(
        server,
        lambda c: c.document.create(
            CreateConfig(
                collection="test_coll",
                document={"_key": "abc"},
                overwrite_mode=OverwriteMode.REPLACE,
            )
        ),
    )
    assert result.unwrap_right().old_rev == "_rev0"
    assert server.last.url.query == b"overwriteMode=replace"


class Doc(BaseModel):
    test: str


def test_return_new_is_validated_into_doc_type(server: MockServer):
    new = {**META, "test": "tester"}
    server.mount("POST", PATH, status=201, json={**META, "new": new})
    result = run(
        server,
        lambda c: c.document.create(
            CreateConfig(collection="test_coll", document={"test": "tester"}, return_new=True),
            Doc,
        ),
    )
    meta = result.unwrap_right()
    assert meta.new_doc == Doc(test="tester")
    assert meta.old_doc is None


def test_silent_create_returns_none(server: MockServer):
    server.mount("POST", PATH, status=202, json={})
    result = run(
        server,
        lambda c: c.document.create(
            CreateConfig(collection="test_coll", document={}, silent=True)
        ),
    )
    assert result == Right(None)


def test_creates_returns_one_either_per_element(server: MockServer):
    server.mount(
        "POST",
        PATH,
        status=202,
        json=[META, arango_error(409, 1210, "unique constraint violated")],
    )
    result = run(
        server,
        lambda c: c.document.creates(
            CreatesConfig(collection="test_coll", documents=[{"_key": "abc"}, {"_key": "abc"}])
        ),
    )
    first, second = result.unwrap_right()
    assert isinstance(first, Right)
    assert first.value.key == "abc"
    assert isinstance(second, Left)
    assert second.value.error_num == 1210


def test_read_sends_conditional_header(server: MockServer):
    server.mount("GET", f"{PATH}/abc", json={**META, "test": "tester"})
    result = run(
        server,
        lambda c: c.document.read(
            ReadConfig(collection="test_coll", key="abc", if_match='"_rev1"')
        ),
    )
    assert result.unwrap_right()["test"] == "tester"
    assert server.last.headers["if-match"] == '"_rev1"'


def test_read_not_modified(server: MockServer):
    server.mount("GET", f"{PATH}/abc", status=304)
    with pytest.raises(DalError) as exc_info:
        run(
            server,
            lambda c: c.document.read(
                ReadConfig(collection="test_coll", key="abc", if_none_match='"_rev1"')
            ),
        )
    assert exc_info.value.kind is ErrorKind.NOT_MODIFIED
    assert exc_info.value.server_error is None


def test_read_precondition_failed_keeps_payload(server: MockServer):
    server.mount(
        "GET",
        f"{PATH}/abc",
        status=412,
        json={**arango_error(412, 1200, "conflict"), **META},
    )
    with pytest.raises(DalError) as exc_info:
        run(
            server,
            lambda c: c.document.read(ReadConfig(collection="test_coll", key="abc", if_match="x")),
        )
    error = exc_info.value
    assert error.kind is ErrorKind.PRECONDITION_FAILED
    assert error.server_error is not None
    assert error.server_error.error_num == 1200
    assert error.server_error.rev == "_rev1"


def test_read_missing_document(server: MockServer):
    server.mount("GET", f"{PATH}/nope", status=404, json=arango_error(404, 1202, "not found"))
    with pytest.raises(DalError) as exc_info:
        run(server, lambda c: c.document.read(ReadConfig(collection="test_coll", key="nope")))
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert "not found" in exc_info.value.message


def test_reads_surfaces_partial_failure(server: MockServer):
    server.mount(
        "PUT",
        PATH,
        json=[{**META, "test": "tester"}, arango_error(404, 1202, "document not found")],
    )
    result = run(
        server,
        lambda c: c.document.reads(
            ReadsConfig(collection="test_coll", documents=[{"_key": "abc"}, {"_key": "nope"}])
        ),
    )
    items = result.unwrap_right()
    assert len(items) == 2
    assert items[0] == Right({**META, "test": "tester"})
    assert isinstance(items[1], Left)
    assert items[1].value.error
    assert items[1].value.error_num == 1202
    assert server.last.url.query == b"onlyget=true"
    assert server.last_json() == [{"_key": "abc"}, {"_key": "nope"}]


def test_replace_and_update_verbs(server: MockServer):
    server.mount("PUT", f"{PATH}/abc", status=202, json={**META, "_oldRev": "_rev0"})
    server.mount("PATCH", f"{PATH}/abc", status=202, json={**META, "_oldRev": "_rev0"})

    async def scenario(conn):
        replaced = await conn.document.replace(
            ReplaceConfig(collection="test_coll", key="abc", document={"b": 1}, if_match="_rev0")
        )
        updated = await conn.document.update(
            UpdateConfig(collection="test_coll", key="abc", document={"c": 2}, keep_null=False)
        )
        return replaced, updated

    replaced, updated = run(server, scenario)
    assert replaced.unwrap_right().old_rev == "_rev0"
    assert updated.unwrap_right().old_rev == "_rev0"
    replace_request, update_request = server.requests[-2:]
    assert replace_request.method == "PUT"
    assert replace_request.headers["if-match"] == "_rev0"
    assert update_request.method == "PATCH"
    assert update_request.url.query == b"keepNull=false"


def test_batch_writes(server: MockServer):
    server.mount("PUT", PATH, status=202, json=[META])
    server.mount("PATCH", PATH, status=202, json=[META])
    server.mount("DELETE", PATH, status=202, json=[arango_error(404, 1202, "not found")])

    async def scenario(conn):
        replaced = await conn.document.replaces(
            ReplacesConfig(collection="test_coll", documents=[{"_key": "abc"}])
        )
        updated = await conn.document.updates(
            UpdatesConfig(collection="test_coll", documents=[{"_key": "abc"}])
        )
        deleted = await conn.document.deletes(
            DeletesConfig(collection="test_coll", documents=["nope"])
        )
        return replaced, updated, deleted

    replaced, updated, deleted = run(server, scenario)
    assert isinstance(replaced.unwrap_right()[0], Right)
    assert isinstance(updated.unwrap_right()[0], Right)
    assert isinstance(deleted.unwrap_right()[0], Left)
    assert server.last.method == "DELETE"
    assert server.last_json() == ["nope"]


def test_delete_returns_old(server: MockServer):
    server.mount("DELETE", f"{PATH}/abc", json={**META, "old": {"test": "tester"}})
    result = run(
        server,
        lambda c: c.document.delete(
            DeleteConfig(collection="test_coll", key="abc", return_old=True)
        ),
    )
    assert result.unwrap_right().old_doc == {"test": "tester"}
    assert server.last.url.query == b"returnOld=true"
    assert server.last.content == b""


def test_malformed_body_is_invalid_body(server: MockServer):
    server.mount("POST", PATH, status=201, json={"_key": "abc"})
    with pytest.raises(DalError) as exc_info:
        run(
            server,
            lambda c: c.document.create(CreateConfig(collection="test_coll", document={})),
        )
    assert exc_info.value.kind is ErrorKind.INVALID_BODY
    assert '"_key"' in exc_info.value.message
