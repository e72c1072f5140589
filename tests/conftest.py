"""Shared fixtures: a fake GitHub client standing in for the hosting API."""

import threading
import time

import pytest
from github import GithubException

from release_pr.models import GlobalSettings, ProjectDefinition
from release_pr.tools import CreatedPullRequest


def github_error(*messages: str, status: int = 422) -> GithubException:
    """A GitHub validation error carrying the given sub-error messages."""
    data = {
        "message": "Validation Failed",
        "errors": [{"resource": "PullRequest", "code": "custom", "message": m} for m in messages],
    }
    return GithubException(status, data, None)


class FakeGitHub:
    """
    Records calls like GitHubTool would make them.

    Args:
        urls: repo -> URL to return on creation (default http://x/<n>)
        failures: repo -> exception raised on creation
        assign_failures: repo -> exception raised when adding assignees
        delays: repo -> seconds to sleep before answering
    """

    def __init__(self, urls=None, failures=None, assign_failures=None, delays=None):
        self.urls = urls or {}
        self.failures = failures or {}
        self.assign_failures = assign_failures or {}
        self.delays = delays or {}
        self.created = []
        self.completed = []
        self.assigned = []
        self.reviewers = []
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def create_pull_request(self, owner, repo, title, head, base, body):
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        time.sleep(self.delays.get(repo, 0))
        with self._lock:
            self.active -= 1
            self.completed.append(repo)
            if repo in self.failures:
                raise self.failures[repo]
            self.created.append({
                "owner": owner, "repo": repo, "title": title,
                "head": head, "base": base, "body": body,
            })
            number = len(self.created)
        return CreatedPullRequest(url=self.urls.get(repo, f"http://x/{number}"), number=number)

    def add_assignees(self, owner, repo, number, names):
        if repo in self.assign_failures:
            raise self.assign_failures[repo]
        with self._lock:
            self.assigned.append((repo, number, list(names)))

    def request_reviewers(self, owner, repo, number, names):
        with self._lock:
            self.reviewers.append((repo, number, list(names)))


@pytest.fixture
def fake_github():
    """Factory for FakeGitHub clients."""
    return FakeGitHub


@pytest.fixture
def settings():
    return GlobalSettings(
        owner="acme",
        token="t0ken",
        user_agent="tests",
        timezone="UTC",
        version="3.2",
        date="10-19-2026",
        assignees=("alice", "bob"),
    )


@pytest.fixture
def scenario_projects():
    return [
        ProjectDefinition(name="A", repo="repo-a", head_template="dev_{version}", base_template="test_{version}"),
        ProjectDefinition(name="B", repo="repo-b", head_template="rel_{version}", base_template="stage_{version}"),
    ]
