"""Tests for the Pydantic data models — payload decoding, immutability, defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ghwatch.models.config import RepoConfig, WatchConfig
from ghwatch.models.runs import WatchState, WorkflowRun, WorkflowRunList


class TestWorkflowRun:
    def test_decodes_api_payload(self, make_run_payload):
        run = WorkflowRun.model_validate(make_run_payload(repo="hello", branch="dev"))
        assert run.repository.name == "hello"
        assert run.repository.full_name == "octo/hello"
        assert run.head_branch == "dev"
        assert run.actor.login == "octocat"

    def test_null_conclusion_becomes_empty(self, make_run_payload):
        run = WorkflowRun.model_validate(
            make_run_payload(conclusion=None, status="in_progress")
        )
        assert run.conclusion == ""
        assert run.status == "in_progress"

    def test_null_description_becomes_empty(self, make_run_payload):
        run = WorkflowRun.model_validate(make_run_payload())
        assert run.repository.description == ""

    def test_unknown_fields_ignored(self, make_run_payload):
        run = WorkflowRun.model_validate(
            make_run_payload(run_attempt=3, head_sha="abc123")
        )
        assert not hasattr(run, "head_sha")

    def test_missing_id_rejected(self, make_run_payload):
        payload = make_run_payload()
        del payload["id"]
        with pytest.raises(ValidationError):
            WorkflowRun.model_validate(payload)

    def test_dedupe_key(self, make_workflow_run):
        run = make_workflow_run(repo="hello", branch="feature/x")
        assert run.dedupe_key == ("hello", "feature/x")

    def test_frozen(self, make_workflow_run):
        run = make_workflow_run()
        with pytest.raises(Exception):
            run.status = "queued"


class TestWorkflowRunList:
    def test_decodes_response(self, make_run_payload):
        body = {
            "total_count": 2,
            "workflow_runs": [make_run_payload(), make_run_payload(branch="dev")],
        }
        result = WorkflowRunList.model_validate(body)
        assert result.total_count == 2
        assert [r.head_branch for r in result.workflow_runs] == ["main", "dev"]

    def test_empty_defaults(self):
        result = WorkflowRunList.model_validate({})
        assert result.total_count == 0
        assert result.workflow_runs == []


class TestConfigModels:
    def test_repo_slug(self):
        assert RepoConfig(owner="octo", name="hello").slug == "octo/hello"

    def test_repo_requires_owner_and_name(self):
        with pytest.raises(ValidationError):
            RepoConfig(owner="", name="hello")

    def test_watch_config_keeps_order(self):
        config = WatchConfig(
            pat="x",
            repos=[{"owner": "b", "name": "2"}, {"owner": "a", "name": "1"}],
        )
        assert [r.slug for r in config.repos] == ["b/2", "a/1"]


class TestWatchState:
    def test_defaults(self):
        state = WatchState()
        assert state.runs == []
        assert state.fetched_at.tzinfo is not None
