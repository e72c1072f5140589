"""Data models for resolved pull request requests and their outcomes."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


PR_BODY = "\n".join([
    "Weekly build trigger for DTE Gold Test",
    "",
    "## Merge Checklist",
    "* [ ] Verify correct merge branches",
    "* [ ] Resolve any and all branch merge conflicts, if they exist",
    "* [ ] Tag merge commit after merging",
    "",
    "**Important Note!** Do **NOT** delete the head branch after completing the pull request merge!",
])


@dataclass(frozen=True)
class ResolvedRequest:
    """A project definition merged with settings, branches fully resolved."""
    name: str
    owner: str
    repo: str
    head: str
    base: str
    version: str
    date: str
    assignees: Tuple[str, ...] = field(default_factory=tuple)
    reviewers: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return f"{self.name} {self.version} {self.date} Merge Dev Branch into Test Branch"

    @property
    def body(self) -> str:
        return PR_BODY

    @property
    def location(self) -> str:
        """Web location of the target repository."""
        return f"https://github.com/{self.owner}/{self.repo}"


@dataclass(frozen=True)
class Success:
    """The pull request was created."""
    reference_url: str
    number: int = 0
    assignment_error: Optional[str] = None  # Set when assignees could not be attached

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The pull request could not be created."""
    message: str

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class ReportEntry:
    """One line of the final report."""
    project_name: str
    outcome: Outcome
