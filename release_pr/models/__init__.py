"""Data models for release pull request generation."""

from .settings import (
    VERSION_PLACEHOLDER,
    AssignmentPolicy,
    ProjectDefinition,
    GlobalSettings,
)
from .request import (
    PR_BODY,
    ResolvedRequest,
    Success,
    Failure,
    Outcome,
    ReportEntry,
)

__all__ = [
    "VERSION_PLACEHOLDER",
    "AssignmentPolicy",
    "ProjectDefinition",
    "GlobalSettings",
    "PR_BODY",
    "ResolvedRequest",
    "Success",
    "Failure",
    "Outcome",
    "ReportEntry",
]
