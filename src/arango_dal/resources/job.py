"""Async job API (`_api/job`).

Job calls are always sent synchronously, even on an async connection.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import TypeAdapter

from arango_dal.errors import DalError, ErrorKind
from arango_dal.models.common import Acknowledged, JobInfo
from arango_dal.query import QueryParam, Suffix
from arango_dal.resources.base import ResourceApi
from arango_dal.wire import DOCUMENT_STATUS_KINDS, HttpVerb, json_decoder, parse, raise_for_status

if TYPE_CHECKING:
    import httpx

BASE_SUFFIX = "_api/job"

_ACK = TypeAdapter(Acknowledged)
_IDS = TypeAdapter(list[str])


class JobKind(StrEnum):
    DONE = "done"
    PENDING = "pending"


class JobTarget(StrEnum):
    """Groups of jobs that can be deleted at once."""

    ALL = "all"
    EXPIRED = "expired"


def job_id(job: JobInfo | str) -> str:
    """Return the id of `job`, rejecting receipts that carry none."""
    if isinstance(job, str):
        return job
    if job.id is None:
        msg = "Job has no id; fire-and-forget requests cannot be followed up"
        raise DalError(msg, kind=ErrorKind.INVALID_INPUT)
    return job.id


class JobApi(ResourceApi):
    """Follow up requests queued with `AsyncKind.STORE`."""

    __slots__: ClassVar[tuple[()]] = ()

    async def _send(self, verb: HttpVerb, suffix: Suffix | str) -> httpx.Response:
        return await self._conn.send(verb, self._conn.join(str(suffix)))

    async def status(self, job: JobInfo | str) -> int:
        """Return the HTTP status of the job's status query.

        200 means the result is ready, 204 that the job is still pending and
        404 that the job is unknown or its result was already fetched.
        """
        response = await self._send(HttpVerb.GET, Suffix(BASE_SUFFIX, job_id(job)))
        return response.status_code

    async def fetch(self, job: JobInfo | str, output_type: Any = dict[str, Any]) -> Any:
        """Fetch a finished job's result and decode it into `output_type`.

        The server forgets the result once it has been fetched.
        """
        response = await self._send(HttpVerb.PUT, Suffix(BASE_SUFFIX, job_id(job)))
        return json_decoder(output_type)(response)

    async def fetch_doc_job(self, job: JobInfo | str, output_type: Any = dict[str, Any]) -> Any:
        """Fetch the result of a queued document operation.

        Failures carry the document status classification, so a stale
        revision surfaces as `PRECONDITION_FAILED`.
        """
        response = await self._send(HttpVerb.PUT, Suffix(BASE_SUFFIX, job_id(job)))
        return json_decoder(output_type, DOCUMENT_STATUS_KINDS)(response)

    async def jobs(self, kind: JobKind = JobKind.DONE, count: int | None = None) -> list[str]:
        """List the ids of done or pending jobs, at most `count` of them."""
        suffix = Suffix(BASE_SUFFIX, kind).value(QueryParam.COUNT, count)
        response = await self._send(HttpVerb.GET, suffix)
        raise_for_status(response)
        return parse(_IDS, response)

    async def cancel(self, job: JobInfo | str) -> bool:
        response = await self._send(HttpVerb.PUT, Suffix(BASE_SUFFIX, job_id(job), "cancel"))
        raise_for_status(response)
        return parse(_ACK, response).result

    async def delete(self, target: JobInfo | JobTarget | str, stamp: int | None = None) -> bool:
        """Delete one job's result, all results, or those older than `stamp`."""
        name = target if isinstance(target, JobTarget) else job_id(target)
        suffix = Suffix(BASE_SUFFIX, name).value(QueryParam.STAMP, stamp)
        response = await self._send(HttpVerb.DELETE, suffix)
        raise_for_status(response)
        return parse(_ACK, response).result
