"""Typed asynchronous client for the ArangoDB HTTP API."""

from arango_dal.connection import (
    ArangoCredentials,
    ArangoParams,
    AsyncKind,
    Connection,
    ConnectionBuilder,
)
from arango_dal.either import ArangoEither, Either, Left, Right
from arango_dal.errors import DalError, ErrorKind
from arango_dal.models.common import ArangoError, JobInfo, Response
from arango_dal.protocols import Collection, Cursor, Database, Document, Graph, Job, Provider
from arango_dal.resources.job import JobKind, JobTarget

__all__ = [
    "ArangoCredentials",
    "ArangoEither",
    "ArangoError",
    "ArangoParams",
    "AsyncKind",
    "Collection",
    "Connection",
    "ConnectionBuilder",
    "Cursor",
    "DalError",
    "Database",
    "Document",
    "Either",
    "ErrorKind",
    "Graph",
    "Job",
    "JobInfo",
    "JobKind",
    "JobTarget",
    "Left",
    "Provider",
    "Response",
    "Right",
]
