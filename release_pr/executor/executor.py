"""Concurrent creation of release pull requests."""

import asyncio
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from github import GithubException

from ..errors import DuplicateOutcomeError
from ..models import (
    AssignmentPolicy,
    Failure,
    Outcome,
    ResolvedRequest,
    Success,
)
from ..tools import CreatedPullRequest, GitHubTool, error_detail
from ..utils import get_logger


class BatchExecutor:
    """
    Creates one pull request per resolved request, all in flight at once.

    Every request runs as its own task on its own worker thread. A task
    converts any failure into a Failure outcome, so one project's error never
    cancels or delays the others, and execute() returns only once every task
    has finished.
    """

    def __init__(
        self,
        client: GitHubTool,
        policy: AssignmentPolicy = AssignmentPolicy.IGNORE
    ):
        """
        Initialize batch executor.

        Args:
            client: GitHub client shared by all tasks
            policy: What a failed assignee/reviewer attachment does to the outcome
        """
        self.client = client
        self.policy = policy
        self.logger = get_logger()

    async def execute(self, requests: Sequence[ResolvedRequest]) -> Dict[str, Outcome]:
        """
        Create all pull requests concurrently.

        Args:
            requests: Resolved requests with unique project names

        Returns:
            Dict mapping project name to its outcome
        """
        outcomes: Dict[str, Outcome] = {}

        async def run_one(request: ResolvedRequest, pool: Executor):
            outcome = await self.create(request, pool)
            self._record(outcomes, request.name, outcome)

        self.logger.info(f"Creating {len(requests)} pull requests...")

        # One thread per request: PyGithub blocks, and no request may queue behind another
        with ThreadPoolExecutor(
            max_workers=max(1, len(requests)),
            thread_name_prefix="release-pr"
        ) as pool:
            results = await asyncio.gather(
                *(run_one(request, pool) for request in requests),
                return_exceptions=True
            )

        # Only bookkeeping defects get here; request errors are already outcomes
        errors: List[BaseException] = [r for r in results if isinstance(r, BaseException)]
        if errors:
            raise errors[0]

        succeeded = sum(1 for outcome in outcomes.values() if outcome.ok)
        self.logger.info(f"Batch complete: {succeeded} created, {len(outcomes) - succeeded} failed")
        return outcomes

    async def _call(self, pool: Optional[Executor], func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(pool, func, *args)

    async def create(self, request: ResolvedRequest, pool: Optional[Executor] = None) -> Outcome:
        """
        Create a single pull request and attach its people.

        Never raises: every error becomes a Failure.

        Args:
            request: The request to create
            pool: Worker threads for blocking API calls (loop default if None)
        """
        try:
            created = await self._call(
                pool,
                self.client.create_pull_request,
                request.owner,
                request.repo,
                request.title,
                request.head,
                request.base,
                request.body,
            )
        except GithubException as e:
            message = error_detail(e)
            self.logger.warning(f"{request.name}: pull request creation failed: {message}")
            return Failure(message=message)
        except Exception as e:
            self.logger.exception(f"{request.name}: unexpected error creating pull request")
            return Failure(message=error_detail(e))

        self.logger.info(f"{request.name}: created {created.url}")

        assignment_error = await self.attach_people(request, created, pool)
        if assignment_error and self.policy == AssignmentPolicy.FAIL:
            return Failure(
                message=f"Pull request {created.url} created, but assignment failed: {assignment_error}"
            )

        return Success(
            reference_url=created.url,
            number=created.number,
            assignment_error=assignment_error,
        )

    async def attach_people(
        self,
        request: ResolvedRequest,
        created: CreatedPullRequest,
        pool: Optional[Executor] = None
    ) -> Optional[str]:
        """
        Attach assignees, then reviewers, to a created pull request.

        Returns:
            The first error message, or None if everything was attached
        """
        steps = [
            ("assignees", self.client.add_assignees, request.assignees),
            ("reviewers", self.client.request_reviewers, request.reviewers),
        ]

        first_error = None
        for label, call, names in steps:
            if not names:
                continue
            try:
                await self._call(
                    pool, call, request.owner, request.repo, created.number, list(names)
                )
            except Exception as e:
                message = error_detail(e)
                self.logger.warning(f"{request.name}: failed to add {label} to #{created.number}: {message}")
                if first_error is None:
                    first_error = message

        return first_error

    def _record(self, outcomes: Dict[str, Outcome], name: str, outcome: Outcome):
        # Tasks share one event loop, so the check and insert cannot interleave
        if name in outcomes:
            raise DuplicateOutcomeError(name)
        outcomes[name] = outcome


def run_batch(
    client: GitHubTool,
    requests: Sequence[ResolvedRequest],
    policy: AssignmentPolicy = AssignmentPolicy.IGNORE
) -> Dict[str, Outcome]:
    """Create all pull requests from synchronous code."""
    return asyncio.run(BatchExecutor(client, policy).execute(requests))
