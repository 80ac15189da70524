"""Shared test fixtures for ghwatch."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from ghwatch.config import WatchSettings
from ghwatch.models.config import RepoConfig, WatchConfig
from ghwatch.models.runs import WorkflowRun

# Fixed "now" for relative-time assertions
FROZEN_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed point in time used as the render clock."""
    return FROZEN_NOW


@pytest.fixture
def isolated_settings() -> WatchSettings:
    """Settings isolated from the developer's environment."""
    return WatchSettings(
        _env_file=None,
        api_base_url="https://api.github.test",
        user_agent="ghwatch-tests",
    )


@pytest.fixture
def repo_config() -> RepoConfig:
    return RepoConfig(owner="octo", name="hello")


@pytest.fixture
def watch_config() -> WatchConfig:
    """Two repositories, in poll order."""
    return WatchConfig(
        pat="ghp_test",
        repos=[
            RepoConfig(owner="octo", name="hello"),
            RepoConfig(owner="octo", name="world"),
        ],
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A valid YAML config on disk."""
    path = tmp_path / "config.yml"
    path.write_text(
        "pat: ghp_test\n"
        "repos:\n"
        "  - owner: octo\n"
        "    name: hello\n"
        "  - owner: octo\n"
        "    name: world\n",
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# Run factories, shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_run_payload() -> Callable[..., dict[str, Any]]:
    """Factory fixture: one workflow run as the API returns it."""
    counter = {"id": 1000}

    def _factory(
        repo: str = "hello",
        branch: str = "main",
        conclusion: str | None = "success",
        status: str = "completed",
        updated_at: str = "2026-03-01T11:57:00Z",
        **overrides: Any,
    ) -> dict[str, Any]:
        counter["id"] += 1
        payload: dict[str, Any] = {
            "id": counter["id"],
            "updated_at": updated_at,
            "name": "CI",
            "head_branch": branch,
            "display_title": f"Build {branch}",
            "status": status,
            "conclusion": conclusion,
            "url": f"https://api.github.test/repos/octo/{repo}/actions/runs/{counter['id']}",
            "actor": {
                "id": 1,
                "login": "octocat",
                "html_url": "https://github.test/octocat",
            },
            "repository": {
                "id": 42,
                "name": repo,
                "full_name": f"octo/{repo}",
                "html_url": f"https://github.test/octo/{repo}",
                "description": None,
            },
        }
        payload.update(overrides)
        return payload

    return _factory


@pytest.fixture
def make_workflow_run(
    make_run_payload: Callable[..., dict[str, Any]],
) -> Callable[..., WorkflowRun]:
    """Factory fixture: build a WorkflowRun with sensible defaults."""

    def _factory(**kwargs: Any) -> WorkflowRun:
        return WorkflowRun.model_validate(make_run_payload(**kwargs))

    return _factory


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory fixture: a ``requests.Response`` stand-in."""

    def _factory(
        json_data: Any = None,
        status_code: int = 200,
        json_error: Exception | None = None,
    ) -> Mock:
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Client Error"
            )
        else:
            response.raise_for_status.return_value = None
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _factory
