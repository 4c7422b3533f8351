"""Payloads of the AQL cursor API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Stats(BaseModel, frozen=True, populate_by_name=True):
    """Execution statistics from `extra.stats`."""

    writes_executed: int = Field(default=0, alias="writesExecuted")
    writes_ignored: int = Field(default=0, alias="writesIgnored")
    scanned_full: int = Field(default=0, alias="scannedFull")
    scanned_index: int = Field(default=0, alias="scannedIndex")
    filtered: int = 0
    http_requests: int = Field(default=0, alias="httpRequests")
    execution_time: float = Field(default=0.0, alias="executionTime")
    peak_memory_usage: int = Field(default=0, alias="peakMemoryUsage")
    full_count: int | None = Field(default=None, alias="fullCount")
    """Only present when `fullCount` was requested."""


class QueryWarning(BaseModel, frozen=True):
    code: int
    message: str


class Extra(BaseModel, frozen=True):
    stats: Stats = Field(default_factory=Stats)
    warnings: list[QueryWarning] = Field(default_factory=list)
    profile: dict[str, Any] | None = None
    """Phase timings, only present when profiling was requested."""

    plan: dict[str, Any] | None = None


class CursorMeta(BaseModel, Generic[T], frozen=True, populate_by_name=True):
    """One batch of query results.

    `id` is set while the server holds more batches (`has_more`).
    """

    id: str | None = None
    result: list[T] | None = None
    extra: Extra | None = None
    count: int | None = None
    """Total result count, only when `count` was requested."""

    code: int
    cached: bool = False
    has_more: bool = Field(default=False, alias="hasMore")
    error: bool = False
