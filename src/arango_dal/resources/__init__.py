"""Resource APIs exposed on a connection."""

from arango_dal.resources.collection import CollectionApi
from arango_dal.resources.cursor import CursorApi
from arango_dal.resources.database import DatabaseApi
from arango_dal.resources.document import DocumentApi
from arango_dal.resources.graph import GraphApi
from arango_dal.resources.job import JobApi, JobKind, JobTarget

__all__ = [
    "CollectionApi",
    "CursorApi",
    "DatabaseApi",
    "DocumentApi",
    "GraphApi",
    "JobApi",
    "JobKind",
    "JobTarget",
]
