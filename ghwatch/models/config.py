"""Watch configuration models — the repositories to poll and the token."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RepoConfig(BaseModel):
    """An ``(owner, name)`` pair identifying a repository to poll."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


class WatchConfig(BaseModel):
    """Contents of the YAML config file.

    ``repos`` order is significant: it is the fetch order, and therefore
    the cross-repository order of the rendered table.
    """

    model_config = ConfigDict(frozen=True)

    pat: str = ""
    repos: list[RepoConfig] = []
