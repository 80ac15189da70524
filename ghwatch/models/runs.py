"""Workflow run models — mirrors the GitHub Actions runs payload."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActorRef(BaseModel):
    """The user that triggered a run."""

    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    login: str = ""
    html_url: str = ""


class RepositoryRef(BaseModel):
    """The repository a run belongs to.  Embedded, never fetched on its own."""

    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    name: str = ""
    full_name: str = ""
    html_url: str = ""
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def empty_if_null(cls, value: object) -> object:
        return "" if value is None else value


class WorkflowRun(BaseModel):
    """One execution of a CI workflow.

    ``updated_at`` is kept as the raw string from the API; it is parsed
    strictly at render time.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    updated_at: str
    name: str = ""
    head_branch: str = ""
    display_title: str = ""
    status: str = ""
    conclusion: str = ""
    url: str = ""
    actor: ActorRef = ActorRef()
    repository: RepositoryRef = RepositoryRef()

    @field_validator(
        "name", "head_branch", "display_title", "status", "conclusion",
        mode="before",
    )
    @classmethod
    def empty_if_null(cls, value: object) -> object:
        # null conclusion means the run hasn't finished
        return "" if value is None else value

    @property
    def dedupe_key(self) -> tuple[str, str]:
        """(repository name, branch name) — at most one visible run per key."""
        return (self.repository.name, self.head_branch)


class WorkflowRunList(BaseModel):
    """Response body of ``GET /repos/{owner}/{name}/actions/runs``."""

    model_config = ConfigDict(frozen=True)

    total_count: int = 0
    workflow_runs: list[WorkflowRun] = []


class WatchState(BaseModel):
    """The single application-state value owned by the watch loop.

    Holds the aggregated (not yet deduplicated) runs of the latest cycle.
    Replaced wholesale on every tick.
    """

    model_config = ConfigDict(frozen=True)

    runs: list[WorkflowRun] = []
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
