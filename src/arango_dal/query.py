"""URL suffix and query string composition."""

from enum import StrEnum
from typing import ClassVar, Self

import httpx

from arango_dal.errors import DalError, ErrorKind


class QueryParam(StrEnum):
    """Query string keys understood by the server."""

    COUNT = "count"
    DROP_COLLECTION = "dropCollection"
    DROP_COLLECTIONS = "dropCollections"
    EXCLUDE_SYSTEM = "excludeSystem"
    IGNORE_REVS = "ignoreRevs"
    IS_SYSTEM = "isSystem"
    KEEP_NULL = "keepNull"
    MERGE_OBJECTS = "mergeObjects"
    ONLY_GET = "onlyget"
    OVERWRITE = "overwrite"
    OVERWRITE_MODE = "overwriteMode"
    RETURN_NEW = "returnNew"
    RETURN_OLD = "returnOld"
    SILENT = "silent"
    STAMP = "stamp"
    WAIT_FOR_SYNC = "waitForSync"
    WITH_DATA = "withData"
    WITH_REVISIONS = "withRevisions"


class Suffix:
    """Accumulates a relative path and its query string.

    Fragments appear in the order they are added. The first one is prefixed
    with `?`, every later one with `&`. Values are not escaped.
    """

    __slots__: ClassVar[tuple[str, str]] = ("_has_query", "_url")

    _has_query: bool
    _url: str

    def __init__(self, *segments: str) -> None:
        self._url = "/".join(segments)
        self._has_query = False

    @property
    def has_query(self) -> bool:
        return self._has_query

    def flag(self, param: QueryParam, value: bool | None, *, omit_false: bool = False) -> Self:
        """Append `param=true|false`, or nothing when `value` is None.

        With `omit_false`, an explicit False is dropped as well.
        """
        if value is None or (omit_false and not value):
            return self
        return self._push(f"{param}={'true' if value else 'false'}")

    def value(self, param: QueryParam, value: object | None) -> Self:
        """Append `param=value`, or nothing when `value` is None."""
        if value is None:
            return self
        return self._push(f"{param}={value}")

    def _push(self, fragment: str) -> Self:
        self._url += "&" if self._has_query else "?"
        self._url += fragment
        self._has_query = True
        return self

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"Suffix({self._url!r})"


def join_url(base: httpx.URL, suffix: str) -> httpx.URL:
    """Resolve a relative suffix against a base URL."""
    try:
        return base.join(suffix)
    except httpx.InvalidURL as e:
        msg = f"Invalid URL suffix {suffix!r}: {e}"
        raise DalError(msg, kind=ErrorKind.INVALID_URL, source=e) from e
