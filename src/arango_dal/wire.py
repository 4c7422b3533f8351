"""HTTP verbs, status classification and response decoders."""

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from arango_dal.either import Either, Left, Right
from arango_dal.errors import DalError, ErrorKind
from arango_dal.models.common import ArangoError

type Decoder[T] = Callable[[httpx.Response], T]


class HttpVerb(StrEnum):
    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


DEFAULT_STATUS_KINDS: Mapping[int, ErrorKind] = {
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
}

# Conditional reads and writes of documents, edges and vertices.
DOCUMENT_STATUS_KINDS: Mapping[int, ErrorKind] = {
    **DEFAULT_STATUS_KINDS,
    304: ErrorKind.NOT_MODIFIED,
    412: ErrorKind.PRECONDITION_FAILED,
}

CURSOR_STATUS_KINDS: Mapping[int, ErrorKind] = {
    **DEFAULT_STATUS_KINDS,
    400: ErrorKind.CURSOR,
    404: ErrorKind.CURSOR,
    410: ErrorKind.CURSOR,
}

_ITEMS: TypeAdapter[list[Any]] = TypeAdapter(list[Any])
_ERROR: TypeAdapter[ArangoError] = TypeAdapter(ArangoError)


def server_error(response: httpx.Response) -> ArangoError | None:
    """Decode the error payload of a failed response, if it has one."""
    if not response.content:
        return None
    try:
        return ArangoError.model_validate_json(response.content)
    except ValidationError:
        return None


def raise_for_status(
    response: httpx.Response,
    kinds: Mapping[int, ErrorKind] = DEFAULT_STATUS_KINDS,
) -> None:
    """Raise a `DalError` classified by `kinds` unless the status is 2xx."""
    if response.is_success:
        return
    error = server_error(response)
    detail = error.error_message if error and error.error_message else response.reason_phrase
    msg = f"Request failed with status {response.status_code}: {detail}"
    raise DalError(
        msg,
        kind=kinds.get(response.status_code, ErrorKind.SERVER),
        server_error=error,
        status=response.status_code,
    )


def validate[T](adapter: TypeAdapter[T], value: Any, response: httpx.Response) -> T:
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        msg = f"Failed to decode response body: {e}\nbody: {response.text}"
        raise DalError(
            msg, kind=ErrorKind.INVALID_BODY, source=e, status=response.status_code
        ) from e


def parse[T](adapter: TypeAdapter[T], response: httpx.Response) -> T:
    """Validate the JSON body of `response` against `adapter`."""
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        msg = f"Failed to decode response body: {e}\nbody: {response.text}"
        raise DalError(
            msg, kind=ErrorKind.INVALID_BODY, source=e, status=response.status_code
        ) from e


def json_decoder(
    output_type: Any,
    kinds: Mapping[int, ErrorKind] = DEFAULT_STATUS_KINDS,
) -> Decoder[Any]:
    """Decode a successful response body into `output_type`."""
    adapter: TypeAdapter[Any] = TypeAdapter(output_type)

    def decode(response: httpx.Response) -> Any:
        raise_for_status(response, kinds)
        return parse(adapter, response)

    return decode


def batch_decoder(
    output_type: Any,
    kinds: Mapping[int, ErrorKind] = DOCUMENT_STATUS_KINDS,
) -> Decoder[list[Either[ArangoError, Any]]]:
    """Decode a batch answer element by element.

    Elements carrying `"error": true` become `Left(ArangoError)`; every other
    element is validated against `output_type` and becomes `Right`.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(output_type)

    def decode(response: httpx.Response) -> list[Either[ArangoError, Any]]:
        raise_for_status(response, kinds)
        results: list[Either[ArangoError, Any]] = []
        for item in parse(_ITEMS, response):
            if isinstance(item, dict) and item.get("error") is True:
                results.append(Left(validate(_ERROR, item, response)))
            else:
                results.append(Right(validate(adapter, item, response)))
        return results

    return decode


def empty_decoder(kinds: Mapping[int, ErrorKind] = DEFAULT_STATUS_KINDS) -> Decoder[None]:
    """Check the status and ignore the body."""

    def decode(response: httpx.Response) -> None:
        raise_for_status(response, kinds)

    return decode
