"""Configurations for the AQL cursor API (`_api/cursor`)."""

from enum import IntEnum
from typing import Any, Self

from pydantic import Field, NonNegativeInt, model_validator

from arango_dal.config.base import RequestConfig, dump_body
from arango_dal.query import Suffix

BATCH_SIZE_ZERO_ERR = "batch_size cannot be 0!"


class ProfileKind(IntEnum):
    """Level of query profiling returned in `extra.profile`."""

    PROFILE_ONLY = 1
    WITH_STATS = 2


class OptimizerRules(RequestConfig, frozen=True):
    rules: list[str]
    """Rules to enable (`+name`) or disable (`-name`); `-all` disables all."""


class CursorOptions(RequestConfig, frozen=True):
    """Extra AQL execution options sent under `options`."""

    fail_on_warning: bool | None = Field(default=None, alias="failOnWarning")
    profile: ProfileKind | None = None
    max_transaction_size: NonNegativeInt | None = Field(default=None, alias="maxTransactionSize")
    optimizer: OptimizerRules | None = None
    stream: bool | None = None
    """Produce results lazily; `count` and `fullCount` are not supported then."""

    max_runtime: NonNegativeInt | None = Field(default=None, alias="maxRuntime")
    """Kill the query after this many seconds."""

    max_warning_count: NonNegativeInt | None = Field(default=None, alias="maxWarningCount")
    intermediate_commit_count: NonNegativeInt | None = Field(
        default=None, alias="intermediateCommitCount"
    )
    intermediate_commit_size: NonNegativeInt | None = Field(
        default=None, alias="intermediateCommitSize"
    )
    max_plans: NonNegativeInt | None = Field(default=None, alias="maxPlans")
    full_count: bool | None = Field(default=None, alias="fullCount")
    """Report the row count before the last top-level LIMIT in `extra.stats`."""


class CreateCursorConfig(RequestConfig, frozen=True):
    """Run an AQL query (`POST _api/cursor`)."""

    query: str
    bind_vars: dict[str, Any] | None = Field(default=None, alias="bindVars")
    count: bool | None = None
    batch_size: NonNegativeInt | None = Field(default=None, alias="batchSize")
    """Results per round trip; must not be 0."""

    cache: bool | None = None
    memory_limit: NonNegativeInt | None = Field(default=None, alias="memoryLimit")
    ttl: NonNegativeInt | None = None
    """Seconds the server keeps an idle cursor alive."""

    options: CursorOptions | None = None

    @model_validator(mode="after")
    def _check_batch_size(self) -> Self:
        if self.batch_size == 0:
            raise ValueError(BATCH_SIZE_ZERO_ERR)
        return self

    def body(self) -> Any:
        return dump_body(self)


class NextCursorConfig(RequestConfig, frozen=True):
    """Fetch the next batch (`PUT _api/cursor/{id}`)."""

    id: str

    def build_suffix(self, base: str) -> str:
        return str(Suffix(base, self.id))


class DeleteCursorConfig(NextCursorConfig, frozen=True):
    """Release a cursor early (`DELETE _api/cursor/{id}`)."""
