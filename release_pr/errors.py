"""Exceptions raised by the release PR generator."""


class ReleasePRError(Exception):
    """Base class for release-pr errors."""


class ConfigError(ReleasePRError):
    """A required setting is missing or invalid."""


class PlanDeclined(ReleasePRError):
    """The operator declined the pull request plan."""


class ReportingError(ReleasePRError):
    """The collected outcomes are inconsistent with the requests."""


class MissingOutcomeError(ReportingError):
    """No outcome was recorded for a requested project."""

    def __init__(self, project_name: str):
        super().__init__(f"No outcome recorded for project '{project_name}'")
        self.project_name = project_name


class DuplicateOutcomeError(ReportingError):
    """An outcome was recorded twice for the same project."""

    def __init__(self, project_name: str):
        super().__init__(f"Outcome already recorded for project '{project_name}'")
        self.project_name = project_name


class PromptCancelled(ReleasePRError):
    """The operator cancelled an interactive prompt."""
