"""Tests for the GitHub API wrapper.

The PyGithub client is mocked; no network access.
"""

from unittest.mock import MagicMock, patch

import pytest
from github import GithubException

from release_pr.tools import CreatedPullRequest, GitHubTool, error_detail

from conftest import github_error


class TestErrorDetail:
    """Tests for extracting messages from API errors."""

    def test_first_sub_error_message(self):
        error = github_error("base branch not found", "head branch not found")

        assert error_detail(error) == "base branch not found"

    def test_sub_error_without_message_uses_api_message(self):
        error = GithubException(422, {"message": "Validation Failed", "errors": [{"code": "invalid"}]}, None)

        assert error_detail(error) == "Validation Failed"

    def test_no_sub_errors_uses_api_message(self):
        error = GithubException(404, {"message": "Not Found"}, None)

        assert error_detail(error) == "Not Found"

    def test_no_data_falls_back_to_string_form(self):
        error = GithubException(502, None, None)

        assert error_detail(error) == str(error)

    def test_plain_exception(self):
        assert error_detail(RuntimeError("timeout")) == "timeout"


class TestGitHubTool:
    """Tests for GitHubTool calls against a mocked PyGithub."""

    @pytest.fixture
    def gh(self):
        with patch("release_pr.tools.github_tool.Github") as github_cls:
            yield github_cls

    def test_requires_token(self, gh):
        with pytest.raises(ValueError, match="token"):
            GitHubTool(token="")

    def test_passes_user_agent(self, gh):
        GitHubTool(token="t0ken", user_agent="HRG GitHub Utilities")

        assert gh.call_args.kwargs["user_agent"] == "HRG GitHub Utilities"

    def test_create_pull_request(self, gh):
        repo = gh.return_value.get_repo.return_value
        repo.create_pull.return_value = MagicMock(html_url="http://x/7", number=7)
        tool = GitHubTool(token="t0ken")

        created = tool.create_pull_request("acme", "repo-a", "Title", "dev_3.2", "test_3.2", "Body")

        assert created == CreatedPullRequest(url="http://x/7", number=7)
        gh.return_value.get_repo.assert_called_with("acme/repo-a", lazy=True)
        repo.create_pull.assert_called_once_with(
            title="Title", body="Body", base="test_3.2", head="dev_3.2"
        )

    def test_create_pull_request_propagates_api_errors(self, gh):
        repo = gh.return_value.get_repo.return_value
        repo.create_pull.side_effect = github_error("base branch not found")
        tool = GitHubTool(token="t0ken")

        with pytest.raises(GithubException):
            tool.create_pull_request("acme", "repo-a", "Title", "dev_3.2", "test_3.2", "Body")

    def test_add_assignees(self, gh):
        repo = gh.return_value.get_repo.return_value
        tool = GitHubTool(token="t0ken")

        tool.add_assignees("acme", "repo-a", 7, ["alice", "bob"])

        repo.get_issue.assert_called_once_with(7)
        repo.get_issue.return_value.add_to_assignees.assert_called_once_with("alice", "bob")

    def test_request_reviewers(self, gh):
        repo = gh.return_value.get_repo.return_value
        tool = GitHubTool(token="t0ken")

        tool.request_reviewers("acme", "repo-a", 7, ("carol",))

        repo.get_pull.assert_called_once_with(7)
        repo.get_pull.return_value.create_review_request.assert_called_once_with(reviewers=["carol"])
