"""Render batch outcomes as an ordered report."""

import sys
from typing import List, Mapping, Optional, Sequence

from .errors import MissingOutcomeError
from .models import Outcome, ReportEntry, ResolvedRequest, Success


SUCCESS_SYMBOL = "✔"
FAILURE_SYMBOL = "✖"
REPORT_HEADER = "==== RELEASE PULL REQUEST RESULTS ===="
LINK_TEXT = "Pull Request Link"


def render(
    requests: Sequence[ResolvedRequest],
    outcomes: Mapping[str, Outcome]
) -> List[ReportEntry]:
    """
    Pair each request with its outcome, in request order.

    Completion order of the batch does not matter; the report always follows
    configuration order.

    Raises:
        MissingOutcomeError: If a request has no recorded outcome
    """
    entries = []
    for request in requests:
        if request.name not in outcomes:
            raise MissingOutcomeError(request.name)
        entries.append(ReportEntry(project_name=request.name, outcome=outcomes[request.name]))
    return entries


def terminal_link(text: str, url: str) -> str:
    """Wrap text in an OSC 8 hyperlink escape sequence."""
    return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


def format_entry(entry: ReportEntry, hyperlinks: bool = False) -> str:
    """
    Format one report line (plus an assignment warning, if any).

    With hyperlinks, a success shows a clickable "Pull Request Link"
    instead of the bare URL.
    """
    outcome = entry.outcome
    if isinstance(outcome, Success):
        link = terminal_link(LINK_TEXT, outcome.reference_url) if hyperlinks else outcome.reference_url
        line = f" {SUCCESS_SYMBOL} {entry.project_name}: {link}"
        if outcome.assignment_error:
            line += f"\n     (assignees not attached: {outcome.assignment_error})"
        return line
    return f" {FAILURE_SYMBOL} {entry.project_name}: {outcome.message}"


def format_report(entries: Sequence[ReportEntry], hyperlinks: bool = False) -> str:
    """Format the full report."""
    lines = ["", REPORT_HEADER, ""]
    if hyperlinks:
        lines.insert(2, "(Hold the Command or Ctrl key to follow the links)")
    lines.extend(format_entry(entry, hyperlinks) for entry in entries)

    succeeded = sum(1 for entry in entries if entry.outcome.ok)
    lines.append("")
    lines.append(f"{succeeded} of {len(entries)} pull requests created")
    return "\n".join(lines)


def print_report(entries: Sequence[ReportEntry], hyperlinks: Optional[bool] = None):
    """Print the report to stdout, with hyperlinks when it is a terminal."""
    if hyperlinks is None:
        hyperlinks = sys.stdout.isatty()
    print(format_report(entries, hyperlinks))
    print()
