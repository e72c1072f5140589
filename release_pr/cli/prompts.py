"""Interactive collection of release settings."""

from typing import List, Sequence

import click

from ..config import ReleaseConfig, parse_names
from ..errors import PromptCancelled


def _prompt(message: str, **kwargs):
    try:
        return click.prompt(message, **kwargs)
    except click.Abort:
        raise PromptCancelled("Prompt cancelled")


def _required(error: str):
    def check(value) -> str:
        value = str(value).strip()
        if not value:
            raise click.UsageError(error)
        return value
    return check


def ask_text(
    message: str,
    initial: str = "",
    error: str = "Please enter a value",
    secret: bool = False
) -> str:
    """
    Ask for a non-empty value, offering initial as the default.

    Args:
        message: Question to ask
        initial: Value used when the answer is empty
        error: Shown when the answer is blank
        secret: Hide the typed value and the default (tokens)
    """
    return _prompt(
        message,
        default=initial or None,
        value_proc=_required(error),
        hide_input=secret,
        show_default=not secret,
    )


def ask_list(
    message: str,
    initial: Sequence[str] = (),
    error: str = "Please enter at least one value"
) -> List[str]:
    """Ask for a comma separated list of names."""
    def check(value) -> List[str]:
        names = parse_names(str(value))
        if not names:
            raise click.UsageError(error)
        return names

    return _prompt(message, default=",".join(initial) or None, value_proc=check)


def ask_yes_no(message: str, default: bool = True) -> bool:
    """Ask a yes/no question."""
    try:
        return click.confirm(message, default=default)
    except click.Abort:
        raise PromptCancelled("Prompt cancelled")


def collect_settings(config: ReleaseConfig) -> ReleaseConfig:
    """
    Ask for version, assignees and token, offering the stored values.

    Raises:
        PromptCancelled: If the operator hits Ctrl-C or EOF
    """
    config.version = ask_text(
        "What version are you building?",
        config.version,
        error="Please enter a version",
    )
    config.assignees = ask_list(
        "Who are the pull request assignees? (separate multiple assignees with a comma)",
        config.assignees,
        error="Please enter at least one assignee",
    )
    token_message = "What GitHub API token should we use?"
    if config.token:
        token_message += " (Enter keeps the saved token)"
    config.token = ask_text(
        token_message,
        config.token,
        error="Please enter a GitHub API token",
        secret=True,
    )
    return config
