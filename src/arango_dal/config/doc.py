"""Configurations for the document API (`_api/document`)."""

from enum import StrEnum
from typing import Any

from arango_dal.config.base import (
    IF_MATCH,
    IF_NONE_MATCH,
    RequestConfig,
    conditional_headers,
    dump_body,
)
from arango_dal.query import QueryParam, Suffix


class OverwriteMode(StrEnum):
    """Behaviour of an insert whose key already exists."""

    IGNORE = "ignore"
    UPDATE = "update"
    REPLACE = "replace"
    CONFLICT = "conflict"


def shape_output(
    suffix: Suffix,
    silent: bool | None,
    return_new: bool | None = None,
    return_old: bool | None = None,
) -> Suffix:
    """Apply `silent`, which suppresses `returnNew` and `returnOld` when true."""
    if silent:
        return suffix.flag(QueryParam.SILENT, True)
    suffix.flag(QueryParam.SILENT, silent)
    suffix.flag(QueryParam.RETURN_NEW, return_new)
    return suffix.flag(QueryParam.RETURN_OLD, return_old)


def shape_overwrite(
    suffix: Suffix,
    overwrite: bool | None,
    overwrite_mode: OverwriteMode | None,
    keep_null: bool | None,
    merge_objects: bool | None,
) -> Suffix:
    """Apply `overwriteMode`, which supersedes the legacy `overwrite` flag.

    `keepNull` and `mergeObjects` only mean something for update mode.
    """
    if overwrite_mode is None:
        return suffix.flag(QueryParam.OVERWRITE, overwrite)
    suffix.value(QueryParam.OVERWRITE_MODE, overwrite_mode)
    if overwrite_mode is OverwriteMode.UPDATE:
        suffix.flag(QueryParam.KEEP_NULL, keep_null)
        suffix.flag(QueryParam.MERGE_OBJECTS, merge_objects)
    return suffix


class _IfMatch(RequestConfig, frozen=True):
    if_match: str | None = None
    """Only apply the change if the stored revision equals this one."""

    def has_header(self) -> bool:
        return self.if_match is not None

    def add_headers(self) -> dict[str, str] | None:
        return conditional_headers(self.has_header(), [(IF_MATCH, self.if_match)])


class _InsertOptions(RequestConfig, frozen=True):
    collection: str
    wait_for_sync: bool | None = None
    return_new: bool | None = None
    return_old: bool | None = None
    silent: bool | None = None
    overwrite: bool | None = None
    overwrite_mode: OverwriteMode | None = None
    keep_null: bool | None = None
    merge_objects: bool | None = None

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.collection).flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
        shape_output(suffix, self.silent, self.return_new, self.return_old)
        shape_overwrite(
            suffix, self.overwrite, self.overwrite_mode, self.keep_null, self.merge_objects
        )
        return str(suffix)


class CreateConfig(_InsertOptions, frozen=True):
    """Insert one document (`POST _api/document/{collection}`)."""

    document: Any
    """The document to insert: a dict or a pydantic model."""

    def body(self) -> Any:
        return dump_body(self.document)


class CreatesConfig(_InsertOptions, frozen=True):
    """Insert many documents in one request."""

    documents: list[Any]

    def body(self) -> Any:
        return dump_body(self.documents)


class ReadConfig(RequestConfig, frozen=True):
    """Read one document (`GET _api/document/{collection}/{key}`)."""

    collection: str
    key: str
    if_match: str | None = None
    """Fail with 412 unless the stored revision equals this one."""

    if_none_match: str | None = None
    """Answer 304 if the stored revision still equals this one."""

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.collection, self.key))

    def has_header(self) -> bool:
        return self.if_match is not None or self.if_none_match is not None

    def add_headers(self) -> dict[str, str] | None:
        return conditional_headers(
            self.has_header(),
            [(IF_MATCH, self.if_match), (IF_NONE_MATCH, self.if_none_match)],
        )


class ReadsConfig(RequestConfig, frozen=True):
    """Read many documents (`PUT _api/document/{collection}?onlyget=true`)."""

    collection: str
    documents: list[Any]
    """Keys, or objects carrying `_key` (and `_rev` when checking revisions)."""

    ignore_revs: bool | None = None

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.collection).flag(QueryParam.ONLY_GET, True)
        return str(suffix.flag(QueryParam.IGNORE_REVS, self.ignore_revs))

    def body(self) -> Any:
        return dump_body(self.documents)


class ReplaceConfig(_IfMatch, frozen=True):
    """Replace one document (`PUT _api/document/{collection}/{key}`)."""

    collection: str
    key: str
    document: Any
    wait_for_sync: bool | None = None
    ignore_revs: bool | None = None
    return_new: bool | None = None
    return_old: bool | None = None
    silent: bool | None = None

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.collection, self.key)
        suffix.flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
        shape_output(suffix, self.silent, self.return_new, self.return_old)
        return str(suffix.flag(QueryParam.IGNORE_REVS, self.ignore_revs))

    def body(self) -> Any:
        return dump_body(self.document)


class ReplacesConfig(RequestConfig, frozen=True):
    """Replace many documents (`PUT _api/document/{collection}`)."""

    collection: str
    documents: list[Any]
    """Replacement documents, each carrying its `_key`."""

    wait_for_sync: bool | None = None
    ignore_revs: bool | None = None
    return_new: bool | None = None
    return_old: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_NEW, self.return_new)
            .flag(QueryParam.RETURN_OLD, self.return_old)
            .flag(QueryParam.IGNORE_REVS, self.ignore_revs)
        )

    def body(self) -> Any:
        return dump_body(self.documents)


class UpdateConfig(_IfMatch, frozen=True):
    """Partially update one document (`PATCH _api/document/{collection}/{key}`)."""

    collection: str
    key: str
    document: Any
    """The patch to merge into the stored document."""

    wait_for_sync: bool | None = None
    ignore_revs: bool | None = None
    return_new: bool | None = None
    return_old: bool | None = None
    silent: bool | None = None
    keep_null: bool | None = None
    merge_objects: bool | None = None

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.collection, self.key)
        suffix.flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
        shape_output(suffix, self.silent, self.return_new, self.return_old)
        return str(
            suffix.flag(QueryParam.KEEP_NULL, self.keep_null)
            .flag(QueryParam.MERGE_OBJECTS, self.merge_objects)
            .flag(QueryParam.IGNORE_REVS, self.ignore_revs)
        )

    def body(self) -> Any:
        return dump_body(self.document)


class UpdatesConfig(RequestConfig, frozen=True):
    """Partially update many documents (`PATCH _api/document/{collection}`)."""

    collection: str
    documents: list[Any]
    wait_for_sync: bool | None = None
    ignore_revs: bool | None = None
    return_new: bool | None = None
    return_old: bool | None = None
    keep_null: bool | None = None
    merge_objects: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_NEW, self.return_new)
            .flag(QueryParam.RETURN_OLD, self.return_old)
            .flag(QueryParam.KEEP_NULL, self.keep_null)
            .flag(QueryParam.MERGE_OBJECTS, self.merge_objects)
            .flag(QueryParam.IGNORE_REVS, self.ignore_revs)
        )

    def body(self) -> Any:
        return dump_body(self.documents)


class DeleteConfig(_IfMatch, frozen=True):
    """Remove one document (`DELETE _api/document/{collection}/{key}`)."""

    collection: str
    key: str
    wait_for_sync: bool | None = None
    return_old: bool | None = None
    silent: bool | None = None

    def build_suffix(self, base: str) -> str:
        suffix = Suffix(base, self.collection, self.key)
        suffix.flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
        return str(shape_output(suffix, self.silent, return_old=self.return_old))


class DeletesConfig(RequestConfig, frozen=True):
    """Remove many documents (`DELETE _api/document/{collection}`)."""

    collection: str
    documents: list[Any]
    """Keys, or objects carrying `_key` (and `_rev` when checking revisions)."""

    wait_for_sync: bool | None = None
    return_old: bool | None = None
    ignore_revs: bool | None = None

    def build_suffix(self, base: str) -> str:
        return str(
            Suffix(base, self.collection)
            .flag(QueryParam.WAIT_FOR_SYNC, self.wait_for_sync)
            .flag(QueryParam.RETURN_OLD, self.return_old)
            .flag(QueryParam.IGNORE_REVS, self.ignore_revs)
        )

    def body(self) -> Any:
        return dump_body(self.documents)
