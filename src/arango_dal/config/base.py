"""Base class shared by every request configuration."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel

from arango_dal.errors import DalError, ErrorKind
from arango_dal.query import join_url

if TYPE_CHECKING:
    from arango_dal.connection import Connection

IF_MATCH = "if-match"
IF_NONE_MATCH = "if-none-match"
REV = "rev"


def dump_body(value: Any) -> Any:
    """Convert a request payload into JSON-compatible data.

    Pydantic models are dumped by alias with unset optionals left out.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list | tuple):
        return [dump_body(item) for item in value]
    return value


def conditional_headers(
    has_header: bool,
    candidates: Sequence[tuple[str, str | None]],
) -> dict[str, str] | None:
    """Return the first set header from `candidates` in priority order."""
    if not has_header:
        return None
    for name, value in candidates:
        if value is not None:
            return {name: value}
    names = ", ".join(f"'{name.replace('-', '_')}'" for name, _ in candidates)
    msg = f"One of {names} should be set!"
    raise DalError(msg, kind=ErrorKind.UNREACHABLE)


class RequestConfig(BaseModel, frozen=True, extra="forbid", populate_by_name=True):
    """A fully validated description of one request.

    Instances are immutable; every required field is checked when the
    configuration is constructed, so nothing invalid reaches the network.
    """

    def build_suffix(self, base: str) -> str:
        """Return the path relative to the database URL, with its query string."""
        return base

    def build_url(self, base: str, conn: "Connection") -> httpx.URL:
        """Resolve `build_suffix(base)` against the connection's database URL."""
        return join_url(conn.db_url, self.build_suffix(base))

    def has_header(self) -> bool:
        """Whether the request carries a conditional header."""
        return False

    def add_headers(self) -> dict[str, str] | None:
        """Return the conditional header for the request, if any."""
        return None

    def body(self) -> Any:
        """Return the JSON body for the request, or None for no body."""
        return None
