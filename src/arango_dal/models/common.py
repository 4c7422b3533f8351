"""Payloads shared by every resource API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class JobInfo(BaseModel, frozen=True):
    """Receipt for a request the server queued as an async job."""

    code: int
    """HTTP status of the hand-off response (always 202)."""

    id: str | None = None
    """Job id from `x-arango-async-id`; absent in fire-and-forget mode."""


class ArangoError(BaseModel, frozen=True, populate_by_name=True):
    """Error payload returned by the server, alone or inside a batch result."""

    error: bool = True
    """Always true for an error payload."""

    error_num: int = Field(alias="errorNum")
    """ArangoDB error number (for example 1202 for a missing document)."""

    error_message: str | None = Field(default=None, alias="errorMessage")
    """Human readable description."""

    code: int | None = None
    """HTTP status code echoed by the server."""

    key: str | None = Field(default=None, alias="_key")
    """Key of the offending document, on revision conflicts."""

    id: str | None = Field(default=None, alias="_id")
    """Handle of the offending document, on revision conflicts."""

    rev: str | None = Field(default=None, alias="_rev")
    """Current revision of the offending document, on revision conflicts."""


class Response(BaseModel, Generic[T], frozen=True):
    """Standard `{error, code, result}` envelope."""

    error: bool
    code: int
    result: T


class Acknowledged(BaseModel, frozen=True):
    """`{result: bool}` answer of job cancellation and deletion."""

    result: bool
