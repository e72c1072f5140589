"""GitHub API wrapper for release pull request operations."""

from dataclasses import dataclass
from typing import Optional, Sequence

import github
from github import Auth, Github
from github.Repository import Repository as GHRepository

from ..utils import get_logger


@dataclass
class CreatedPullRequest:
    """A pull request returned by the GitHub API."""
    url: str
    number: int


def error_detail(error: Exception) -> str:
    """
    Extract the most specific message from a GitHub API error.

    GitHub validation failures carry a list of sub-errors; the first one's
    message is the most useful detail. Otherwise the API's own message is
    used, and anything else falls back to the error's string form.
    """
    data = getattr(error, "data", None)
    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
            if isinstance(first, str) and first:
                return first
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return str(error)


class GitHubTool:
    """
    GitHub API wrapper used by the batch executor.

    Handles:
    - Creating pull requests
    - Attaching assignees
    - Requesting reviewers

    The client holds no per-request state and is shared across the
    executor's worker threads.
    """

    def __init__(
        self,
        token: str,
        user_agent: Optional[str] = None,
        debug: bool = False
    ):
        """
        Initialize GitHub tool.

        Args:
            token: GitHub API token
            user_agent: User-Agent header sent with every request
            debug: Log every HTTP exchange
        """
        if not token:
            raise ValueError("GitHub token required")

        self.logger = get_logger()
        if debug:
            github.enable_console_debug_logging()

        kwargs = {"auth": Auth.Token(token)}
        if user_agent:
            kwargs["user_agent"] = user_agent
        self.gh = Github(**kwargs)

    def _repo(self, owner: str, repo: str) -> GHRepository:
        # lazy=True skips the GET; errors surface on the first real call
        return self.gh.get_repo(f"{owner}/{repo}", lazy=True)

    def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        body: str
    ) -> CreatedPullRequest:
        """
        Open a pull request.

        Raises:
            GithubException: If GitHub rejects the request
        """
        pr = self._repo(owner, repo).create_pull(
            title=title,
            body=body,
            base=base,
            head=head,
        )
        self.logger.debug(f"Created {owner}/{repo} PR #{pr.number}: {pr.html_url}")
        return CreatedPullRequest(url=pr.html_url, number=pr.number)

    def add_assignees(
        self,
        owner: str,
        repo: str,
        number: int,
        names: Sequence[str]
    ):
        """Assign users to a pull request."""
        issue = self._repo(owner, repo).get_issue(number)
        issue.add_to_assignees(*names)

    def request_reviewers(
        self,
        owner: str,
        repo: str,
        number: int,
        names: Sequence[str]
    ):
        """Request reviews from users on a pull request."""
        pr = self._repo(owner, repo).get_pull(number)
        pr.create_review_request(reviewers=list(names))
