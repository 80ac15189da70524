"""Fetcher — one blocking GET per repository against the Actions runs API.

There is no retry and no partial-result tolerance.  Every failure
(transport, HTTP status, JSON body, payload shape) surfaces as
``FetchError`` and ends the watch session.
"""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from ghwatch.config import WatchSettings, settings as default_settings
from ghwatch.models.config import RepoConfig
from ghwatch.models.runs import WorkflowRunList

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when the workflow runs of a repository cannot be fetched."""

    def __init__(self, repo: RepoConfig, message: str) -> None:
        super().__init__(f"{repo.slug}: {message}")
        self.repo = repo


def build_headers(token: str, user_agent: str) -> dict[str, str]:
    """Fixed request headers for the runs endpoint."""
    return {
        "Authorization": f"token {token}",
        "User-Agent": user_agent,
        "Accept": "application/json",
    }


def fetch_workflow_runs(
    repo: RepoConfig,
    token: str,
    *,
    session: requests.Session | None = None,
    settings: WatchSettings | None = None,
) -> WorkflowRunList:
    """Fetch the workflow runs of *repo*, most recent first.

    Parameters
    ----------
    repo:
        The repository to query.
    token:
        Personal access token sent as ``Authorization: token <PAT>``.
    session:
        Optional ``requests.Session`` to reuse connections across calls.
    settings:
        Runtime settings; defaults to the module singleton.

    Raises
    ------
    FetchError
        On any transport error, non-2xx status, undecodable body or
        unexpected payload shape.
    """
    cfg = settings or default_settings
    url = cfg.runs_url(repo.owner, repo.name)
    http = session or requests

    logger.debug("GET %s", url)
    try:
        response = http.get(
            url,
            headers=build_headers(token, cfg.user_agent),
            timeout=cfg.request_timeout,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise FetchError(
            repo, f"Error sending request to the GitHub API: {exc}"
        ) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(repo, f"Response body is not JSON: {exc}") from exc

    try:
        runs = WorkflowRunList.model_validate(payload)
    except ValidationError as exc:
        raise FetchError(repo, f"Unexpected response payload: {exc}") from exc

    logger.debug(
        "%s: %d runs (total_count=%d)",
        repo.slug,
        len(runs.workflow_runs),
        runs.total_count,
    )
    return runs
