"""Document API (`_api/document`)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from arango_dal.models.doc import DocMeta
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import (
    DOCUMENT_STATUS_KINDS,
    Decoder,
    HttpVerb,
    batch_decoder,
    empty_decoder,
    json_decoder,
)

if TYPE_CHECKING:
    from arango_dal.config.doc import (
        CreateConfig,
        CreatesConfig,
        DeleteConfig,
        DeletesConfig,
        ReadConfig,
        ReadsConfig,
        ReplaceConfig,
        ReplacesConfig,
        UpdateConfig,
        UpdatesConfig,
    )
    from arango_dal.either import ArangoEither, Either
    from arango_dal.models.common import ArangoError

BASE_SUFFIX = "_api/document"


def _write_decoder(silent: bool | None, doc_type: Any) -> Decoder[Any]:
    # A silent write answers with an empty object.
    if silent:
        return empty_decoder(DOCUMENT_STATUS_KINDS)
    return json_decoder(DocMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS)


def _batch_write_decoder(doc_type: Any) -> Decoder[Any]:
    return batch_decoder(DocMeta[doc_type, doc_type], DOCUMENT_STATUS_KINDS)


class DocumentApi(ResourceApi):
    """Reads and writes of documents, one at a time or in batches.

    `doc_type` is the type `new`, `old` and read documents are validated
    against; it defaults to a plain dict. Batch operations return one
    `Either` per input element, `Left(ArangoError)` for the elements the
    server rejected.
    """

    __slots__: ClassVar[tuple[()]] = ()

    async def create(
        self, config: CreateConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[DocMeta[Any, Any] | None]:
        return await self._call(
            HttpVerb.POST, config, BASE_SUFFIX, _write_decoder(config.silent, doc_type)
        )

    async def creates(
        self, config: CreatesConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[list[Either[ArangoError, DocMeta[Any, Any]]] | None]:
        decode = (
            empty_decoder(DOCUMENT_STATUS_KINDS)
            if config.silent
            else _batch_write_decoder(doc_type)
        )
        return await self._call(HttpVerb.POST, config, BASE_SUFFIX, decode)

    async def read(self, config: ReadConfig, doc_type: Any = dict[str, Any]) -> ArangoEither[Any]:
        return await self._call(
            HttpVerb.GET, config, BASE_SUFFIX, json_decoder(doc_type, DOCUMENT_STATUS_KINDS)
        )

    async def reads(
        self, config: ReadsConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[list[Either[ArangoError, Any]]]:
        return await self._call(
            HttpVerb.PUT, config, BASE_SUFFIX, batch_decoder(doc_type, DOCUMENT_STATUS_KINDS)
        )

    async def replace(
        self, config: ReplaceConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[DocMeta[Any, Any] | None]:
        return await self._call(
            HttpVerb.PUT, config, BASE_SUFFIX, _write_decoder(config.silent, doc_type)
        )

    async def replaces(
        self, config: ReplacesConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[list[Either[ArangoError, DocMeta[Any, Any]]]]:
        return await self._call(HttpVerb.PUT, config, BASE_SUFFIX, _batch_write_decoder(doc_type))

    async def update(
        self, config: UpdateConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[DocMeta[Any, Any] | None]:
        return await self._call(
            HttpVerb.PATCH, config, BASE_SUFFIX, _write_decoder(config.silent, doc_type)
        )

    async def updates(
        self, config: UpdatesConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[list[Either[ArangoError, DocMeta[Any, Any]]]]:
        return await self._call(
            HttpVerb.PATCH, config, BASE_SUFFIX, _batch_write_decoder(doc_type)
        )

    async def delete(
        self, config: DeleteConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[DocMeta[Any, Any] | None]:
        return await self._call(
            HttpVerb.DELETE, config, BASE_SUFFIX, _write_decoder(config.silent, doc_type)
        )

    async def deletes(
        self, config: DeletesConfig, doc_type: Any = dict[str, Any]
    ) -> ArangoEither[list[Either[ArangoError, DocMeta[Any, Any]]]]:
        return await self._call(
            HttpVerb.DELETE, config, BASE_SUFFIX, _batch_write_decoder(doc_type)
        )
