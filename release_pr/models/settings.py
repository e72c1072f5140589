"""Data models for project definitions and run-wide settings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..errors import ConfigError


VERSION_PLACEHOLDER = "{version}"


class AssignmentPolicy(Enum):
    """What a failed assignee/reviewer attachment does to a created PR."""
    IGNORE = "ignore"  # PR creation success wins, failure shown as a warning
    FAIL = "fail"      # Report the project as failed


@dataclass(frozen=True)
class ProjectDefinition:
    """Static template for one recurring release merge."""
    name: str
    repo: str
    head_template: str
    base_template: str

    def to_dict(self) -> dict:
        """Serialize using the settings file keys."""
        return {
            "name": self.name,
            "repo": self.repo,
            "head": self.head_template,
            "base": self.base_template,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectDefinition":
        """Build a project from a settings file entry."""
        missing = [key for key in ("name", "repo", "head", "base") if not data.get(key)]
        if missing:
            raise ConfigError(
                f"Project entry {data!r} is missing required keys: {', '.join(missing)}"
            )
        return cls(
            name=str(data["name"]),
            repo=str(data["repo"]),
            head_template=str(data["head"]),
            base_template=str(data["base"]),
        )


@dataclass(frozen=True)
class GlobalSettings:
    """Values shared by every project in a run."""

    # GitHub settings
    owner: str
    token: str = ""
    user_agent: str = ""
    timezone: str = "UTC"

    # Release settings
    version: str = ""
    date: str = ""  # MM-dd-yyyy
    assignees: Tuple[str, ...] = field(default_factory=tuple)
    reviewers: Tuple[str, ...] = field(default_factory=tuple)

    # Run behavior
    automatic: bool = False
    debug: bool = False
    assignment_policy: AssignmentPolicy = AssignmentPolicy.IGNORE

    def validate(self) -> "GlobalSettings":
        """Raise ConfigError if a value required to issue requests is missing."""
        if not self.version:
            raise ConfigError("A release version is required")
        if not self.assignees:
            raise ConfigError("At least one assignee is required")
        if not self.token:
            raise ConfigError("A GitHub API token is required")
        if not self.owner:
            raise ConfigError("A repository owner is required")
        return self
