"""Tools for the release PR generator."""

from .github_tool import CreatedPullRequest, GitHubTool, error_detail

__all__ = [
    "CreatedPullRequest",
    "GitHubTool",
    "error_detail",
]
