"""Authenticated connection to an ArangoDB server."""

import logging
from enum import StrEnum
from typing import Any, ClassVar, Self

import httpx
from pydantic import BaseModel, Field, TypeAdapter

from arango_dal.either import ArangoEither, Left, Right
from arango_dal.errors import DalError, ErrorKind
from arango_dal.models.common import JobInfo
from arango_dal.query import join_url
from arango_dal.resources.collection import CollectionApi
from arango_dal.resources.cursor import CursorApi
from arango_dal.resources.database import DatabaseApi
from arango_dal.resources.document import DocumentApi
from arango_dal.resources.graph import GraphApi
from arango_dal.resources.job import JobApi
from arango_dal.wire import Decoder, HttpVerb, parse, raise_for_status

logger = logging.getLogger(__name__)

ASYNC_HEADER = "x-arango-async"
ASYNC_ID_HEADER = "x-arango-async-id"
AUTH_SUFFIX = "_open/auth"


class AsyncKind(StrEnum):
    """Value of the `x-arango-async` header."""

    FIRE_AND_FORGET = "true"
    """Queue the request and forget it; no job id is returned."""

    STORE = "store"
    """Queue the request and keep its result for later fetching."""


class ArangoCredentials(BaseModel, frozen=True):
    """Credentials exchanged for a JWT at `/_open/auth`."""

    url: str
    """Server root, for example http://localhost:8529."""

    username: str = "root"
    password: str = Field(default="", repr=False)


class ArangoParams(BaseModel, frozen=True):
    """Parameters of a connection."""

    database: str | None = None
    """Database the per-database URL points at; the server root when unset."""

    async_kind: AsyncKind | None = None
    """Send every resource request as an async job of this kind."""

    timeout: float = 30.0
    """Seconds before a request is abandoned."""


class _Auth(BaseModel, frozen=True):
    jwt: str


_AUTH = TypeAdapter(_Auth)


def _parse_base_url(url: str) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        msg = f"Invalid connection URL {url!r}: {e}"
        raise DalError(msg, kind=ErrorKind.INVALID_URL, source=e) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        msg = f"Invalid connection URL {url!r}: expected an http(s) URL with a host"
        raise DalError(msg, kind=ErrorKind.INVALID_URL)
    if not parsed.path.endswith("/"):
        parsed = parsed.copy_with(path=f"{parsed.path}/")
    return parsed


def _transport_error(e: httpx.HTTPError, verb: str, url: httpx.URL) -> DalError:
    kind = ErrorKind.TIMEOUT if isinstance(e, httpx.TimeoutException) else ErrorKind.CONNECTION
    msg = f"{verb} {url} failed: {e}"
    return DalError(msg, kind=kind, source=e)


class Connection:
    """An authenticated client bound to one server and, optionally, one database.

    Resource operations are grouped by API: `database`, `collection`,
    `document`, `cursor`, `graph` and `job`. A connection never changes
    after it is built; `with_async_kind` returns a sibling that shares the
    same HTTP client.
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "_async_kind",
        "_base_url",
        "_client",
        "_db_url",
        "collection",
        "cursor",
        "database",
        "document",
        "graph",
        "job",
    )

    _async_kind: AsyncKind | None
    _base_url: httpx.URL
    _client: httpx.AsyncClient
    _db_url: httpx.URL

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: httpx.URL,
        db_url: httpx.URL,
        async_kind: AsyncKind | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._db_url = db_url
        self._async_kind = async_kind
        self.database = DatabaseApi(self)
        self.collection = CollectionApi(self)
        self.document = DocumentApi(self)
        self.cursor = CursorApi(self)
        self.graph = GraphApi(self)
        self.job = JobApi(self)

    @classmethod
    async def connect(
        cls,
        credentials: ArangoCredentials,
        params: ArangoParams,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Self:
        """Exchange the credentials for a JWT and build the connection."""
        base_url = _parse_base_url(credentials.url)
        client = httpx.AsyncClient(
            headers={"accept": "application/json"},
            timeout=params.timeout,
            transport=transport,
        )
        try:
            jwt = await _authenticate(client, base_url, credentials)
        except DalError:
            await client.aclose()
            raise
        client.headers["authorization"] = f"bearer {jwt}"

        db_url = join_url(base_url, f"_db/{params.database}/") if params.database else base_url
        logger.info("Authenticated against %s as %s", base_url, credentials.username)
        return cls(client, base_url, db_url, params.async_kind)

    async def disconnect(self) -> None:
        """Close the HTTP client, for this connection and its siblings."""
        await self._client.aclose()

    def with_async_kind(self, async_kind: AsyncKind | None) -> Self:
        """Return a connection sharing this client with another async mode."""
        return type(self)(self._client, self._base_url, self._db_url, async_kind)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def db_url(self) -> httpx.URL:
        return self._db_url

    @property
    def async_kind(self) -> AsyncKind | None:
        return self._async_kind

    @property
    def is_async(self) -> bool:
        return self._async_kind is not None

    def join(self, suffix: str, *, root: bool = False) -> httpx.URL:
        """Resolve `suffix` against the database URL, or the server root."""
        return join_url(self._base_url if root else self._db_url, suffix)

    async def send(
        self,
        verb: HttpVerb,
        url: httpx.URL,
        *,
        headers: dict[str, str] | None = None,
        body: Any = None,
        use_async: bool = False,
    ) -> httpx.Response:
        """Send one request and return the raw response."""
        request_headers = dict(headers or {})
        if use_async and self._async_kind is not None:
            request_headers[ASYNC_HEADER] = str(self._async_kind)
        logger.debug("%s %s", verb, url)
        try:
            return await self._client.request(verb, url, headers=request_headers, json=body)
        except httpx.HTTPError as e:
            raise _transport_error(e, verb, url) from e

    async def request[T](
        self,
        verb: HttpVerb,
        url: httpx.URL,
        *,
        decode: Decoder[T],
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> ArangoEither[T]:
        """Send a resource request and decode its answer.

        In async mode a 202 is the server's job receipt and becomes
        `Left(JobInfo)`; any other answer goes through `decode`.
        """
        response = await self.send(verb, url, headers=headers, body=body, use_async=self.is_async)
        if self.is_async and response.status_code == httpx.codes.ACCEPTED:
            job = JobInfo(code=response.status_code, id=response.headers.get(ASYNC_ID_HEADER))
            logger.debug("%s %s queued as job %s", verb, url, job.id)
            return Left(job)
        return Right(decode(response))

    def __repr__(self) -> str:
        return f"Connection({str(self._db_url)!r}, async_kind={self._async_kind!r})"


async def _authenticate(
    client: httpx.AsyncClient,
    base_url: httpx.URL,
    credentials: ArangoCredentials,
) -> str:
    url = join_url(base_url, AUTH_SUFFIX)
    try:
        response = await client.post(
            url,
            json={"username": credentials.username, "password": credentials.password},
        )
    except httpx.HTTPError as e:
        raise _transport_error(e, HttpVerb.POST, url) from e
    raise_for_status(response)
    return parse(_AUTH, response).jwt


class ConnectionBuilder(BaseModel, frozen=True):
    """All connection options in one place.

    `url` is required; the remaining options default to user `root` with an
    empty password, the server root URL and synchronous requests.
    """

    url: str
    username: str = "root"
    password: str = Field(default="", repr=False)
    database: str | None = None
    async_kind: AsyncKind | None = None
    timeout: float = 30.0

    async def build(self, transport: httpx.AsyncBaseTransport | None = None) -> Connection:
        """Authenticate and return the connection."""
        credentials = ArangoCredentials(
            url=self.url, username=self.username, password=self.password
        )
        params = ArangoParams(
            database=self.database, async_kind=self.async_kind, timeout=self.timeout
        )
        return await Connection.connect(credentials, params, transport)
