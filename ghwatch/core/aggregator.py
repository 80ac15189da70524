"""Aggregator — fetch every configured repository and concatenate the runs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import requests

from ghwatch.core.fetcher import fetch_workflow_runs
from ghwatch.models.config import RepoConfig, WatchConfig
from ghwatch.models.runs import WatchState, WorkflowRun, WorkflowRunList

logger = logging.getLogger(__name__)

FetchFn = Callable[..., WorkflowRunList]


def get_all_workflow_runs(
    repos: Iterable[RepoConfig],
    token: str,
    *,
    fetch: FetchFn = fetch_workflow_runs,
    session: requests.Session | None = None,
) -> list[WorkflowRun]:
    """Fetch runs for each repository in config order and flatten them.

    Each repository's runs keep the order the API returned them in
    (most recent first).  Cross-repository order is fetch order; the
    result is not globally sorted by time.

    Fetches are sequential.  A ``FetchError`` from any repository
    propagates immediately and the remaining repositories are not
    queried.
    """
    own_session = session is None
    http = session or requests.Session()
    runs: list[WorkflowRun] = []
    try:
        for repo in repos:
            response = fetch(repo, token, session=http)
            runs.extend(response.workflow_runs)
    finally:
        if own_session:
            http.close()

    logger.debug("Aggregated %d runs", len(runs))
    return runs


def poll_watch_state(
    config: WatchConfig,
    *,
    fetch: FetchFn = fetch_workflow_runs,
    session: requests.Session | None = None,
) -> WatchState:
    """Run one poll cycle and wrap the result as the new application state."""
    runs = get_all_workflow_runs(
        config.repos, config.pat, fetch=fetch, session=session
    )
    return WatchState(runs=runs)
