"""Response payloads, one module per resource API."""

from arango_dal.models.common import Acknowledged, ArangoError, JobInfo, Response

__all__ = [
    "Acknowledged",
    "ArangoError",
    "JobInfo",
    "Response",
]
