"""Request configurations, one module per resource API."""

from arango_dal.config.base import RequestConfig

__all__ = [
    "RequestConfig",
]
