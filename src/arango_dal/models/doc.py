"""Payloads of the document API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

N = TypeVar("N")
O = TypeVar("O")  # noqa: E741


class DocMeta(BaseModel, Generic[N, O], frozen=True, populate_by_name=True):
    """Identity of a written document, plus its new and old bodies if requested.

    `new_doc` is only present when `returnNew` was requested, `old_doc` only
    when `returnOld` was requested on an operation that replaced something,
    and `old_rev` only on update, replace and delete.
    """

    key: str = Field(alias="_key")
    id: str = Field(alias="_id")
    rev: str = Field(alias="_rev")
    old_rev: str | None = Field(default=None, alias="_oldRev")
    new_doc: N | None = Field(default=None, alias="new")
    old_doc: O | None = Field(default=None, alias="old")
