"""Error types for ArangoDB operations."""

from enum import StrEnum
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from arango_dal.models.common import ArangoError


class ErrorKind(StrEnum):
    """Classification of client errors."""

    CONNECTION = "connection"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INVALID_URL = "invalid_url"
    INVALID_BODY = "invalid_body"
    UNREACHABLE = "unreachable"
    UNAUTHORIZED = "unauthorized"
    NOT_MODIFIED = "not_modified"
    PRECONDITION_FAILED = "precondition_failed"
    CONFLICT = "conflict"
    CURSOR = "cursor"
    SERVER = "server"


@final
class DalError(Exception):
    """Base error for all client operations.

    `server_error` carries the decoded error payload when the server sent
    one, and `status` the HTTP status code that produced it.
    """

    __slots__ = ("kind", "message", "server_error", "source", "status")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.SERVER,
        source: BaseException | None = None,
        server_error: "ArangoError | None" = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source
        self.server_error = server_error
        self.status = status

    def __repr__(self) -> str:
        return f"DalError({self.message!r}, kind={self.kind!r}, status={self.status!r})"
