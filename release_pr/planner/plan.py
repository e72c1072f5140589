"""Build and confirm the list of pull requests for a release."""

from typing import Callable, List, Sequence

from ..errors import PlanDeclined
from ..models import GlobalSettings, ProjectDefinition, ResolvedRequest
from ..utils import get_logger
from .template import resolve


AskYesNo = Callable[[str, bool], bool]


def merge_project(settings: GlobalSettings, project: ProjectDefinition) -> ResolvedRequest:
    """
    Merge run-wide settings into one project definition.

    The project supplies name, repo and branch templates; the settings supply
    owner, version, date, assignees and reviewers.
    """
    return ResolvedRequest(
        name=project.name,
        owner=settings.owner,
        repo=project.repo,
        head=resolve(project.head_template, settings.version),
        base=resolve(project.base_template, settings.version),
        version=settings.version,
        date=settings.date,
        assignees=tuple(settings.assignees),
        reviewers=tuple(settings.reviewers),
    )


def build_plan(
    settings: GlobalSettings,
    projects: Sequence[ProjectDefinition]
) -> List[ResolvedRequest]:
    """
    Resolve every project into a concrete pull request request.

    Args:
        settings: Run-wide settings
        projects: Project definitions in configuration order

    Returns:
        Resolved requests, in the same order as projects
    """
    return [merge_project(settings, project) for project in projects]


def format_plan(requests: Sequence[ResolvedRequest]) -> str:
    """Describe the planned pull requests for the operator."""
    lines = ["The generator will attempt to create the following pull requests:", ""]
    for request in requests:
        lines.append(f"{request.name} [in {request.location}]")
        lines.append(f"   {request.base} <-- {request.head}")
    return "\n".join(lines)


def confirm_plan(
    requests: Sequence[ResolvedRequest],
    settings: GlobalSettings,
    ask: AskYesNo
) -> bool:
    """
    Show the plan and ask the operator to confirm it.

    In automatic mode nothing is printed to the prompt and the plan is
    accepted without calling ask.
    """
    logger = get_logger()

    if settings.automatic:
        logger.info(f"Automatic mode: creating {len(requests)} pull requests without confirmation")
        return True

    print(format_plan(requests))
    print()
    return ask("Is this okay?", True)


def prepare_requests(
    settings: GlobalSettings,
    projects: Sequence[ProjectDefinition],
    ask: AskYesNo
) -> List[ResolvedRequest]:
    """
    Build the plan and get it confirmed.

    Raises:
        PlanDeclined: If the operator rejects the plan
    """
    requests = build_plan(settings, projects)
    if not confirm_plan(requests, settings, ask):
        raise PlanDeclined("Pull request plan declined")
    return requests
