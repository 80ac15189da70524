"""ghwatch data models — all Pydantic v2, all frozen (immutable)."""

from ghwatch.models.config import RepoConfig, WatchConfig
from ghwatch.models.runs import (
    ActorRef,
    RepositoryRef,
    WatchState,
    WorkflowRun,
    WorkflowRunList,
)

__all__ = [
    # config
    "RepoConfig",
    "WatchConfig",
    # runs
    "ActorRef",
    "RepositoryRef",
    "WatchState",
    "WorkflowRun",
    "WorkflowRunList",
]
