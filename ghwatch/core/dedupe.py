"""Deduplicator — keep the first run seen for each (repository, branch).

Combined with the API's most-recent-first ordering this yields the most
recent run per branch.
"""

from __future__ import annotations

from collections.abc import Iterable

from ghwatch.models.runs import WorkflowRun


def is_workflow_run_unique(
    selected: list[WorkflowRun], repo_name: str, branch: str
) -> bool:
    """True if no run in *selected* has the same repository name and branch."""
    for run in selected:
        if run.repository.name == repo_name and run.head_branch == branch:
            return False
    return True


def unique_workflow_runs(runs: Iterable[WorkflowRun]) -> list[WorkflowRun]:
    """Reduce *runs* to at most one run per (repository name, branch name).

    The first occurrence wins and relative order is preserved.  The scan
    is quadratic, which is fine for a handful of repositories and
    branches.
    """
    selected: list[WorkflowRun] = []
    for run in runs:
        if is_workflow_run_unique(selected, *run.dedupe_key):
            selected.append(run)
    return selected
