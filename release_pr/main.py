#!/usr/bin/env python3
"""
Release PR Generator - Main Entry Point

Creates "merge dev branch into test branch" pull requests for every configured
project of a release, concurrently, and reports the result of each one.

Usage:
    release-pr                      # interactive
    release-pr --automatic --version 3.2 --assignees alice,bob
    release-pr init [path]
"""

import argparse
import sys
from pathlib import Path
from typing import Callable

from . import __version__
from .cli import ask_yes_no, collect_settings, init_config
from .config import DEFAULT_CONFIG_FILE, ConfigStore, ReleaseConfig, parse_names
from .errors import ConfigError, PlanDeclined, PromptCancelled, ReportingError
from .executor import run_batch
from .models import AssignmentPolicy
from .planner import prepare_requests
from .reporter import print_report, render
from .tools import GitHubTool
from .utils import setup_logging, get_logger


EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_REPORT_ERROR = 2


def run_release(
    config: ReleaseConfig,
    store: ConfigStore,
    client_factory: Callable[..., GitHubTool] = GitHubTool
) -> int:
    """
    Run the complete release pipeline: collect, plan, execute, report.

    Args:
        config: Config loaded from file, env and command line
        store: Settings file the config is saved back to
        client_factory: Builds the GitHub client from token, user agent and debug flag

    Returns:
        Process exit code
    """
    logger = get_logger()

    try:
        if not config.automatic:
            collect_settings(config)
        settings = config.to_settings()
        requests = prepare_requests(settings, config.projects, ask_yes_no)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR
    except (PlanDeclined, PromptCancelled):
        logger.info("Aborted, no pull requests created")
        return EXIT_OK

    client = client_factory(
        token=settings.token,
        user_agent=settings.user_agent,
        debug=settings.debug,
    )
    outcomes = run_batch(client, requests, settings.assignment_policy)

    try:
        entries = render(requests, outcomes)
    except ReportingError as e:
        logger.error(f"Internal error while reporting results: {e}")
        return EXIT_REPORT_ERROR

    print_report(entries)

    # Automatic runs may carry secrets from the environment; keep them out of the file
    if not config.automatic:
        store.save(config)

    return EXIT_OK


def load_config(args, store: ConfigStore) -> ReleaseConfig:
    """
    Load the settings file, then apply env vars and command line flags.

    Raises:
        ConfigError: If the settings file is invalid
    """
    config = store.load().apply_env()
    return config.with_overrides(
        version=args.release_version,
        owner=args.owner,
        token=args.token,
        assignees=parse_names(args.assignees) if args.assignees else None,
        assignment_policy=AssignmentPolicy.FAIL if args.strict_assignees else None,
        automatic=args.automatic,
        debug=args.debug,
    )


def cmd_run(args):
    """Handle the default 'run' command."""
    setup_logging(debug=args.debug)
    logger = get_logger()

    print(f"==== RELEASE PULL REQUEST GENERATOR (v{__version__}) ====\n")

    store = ConfigStore(args.config_file)
    try:
        config = load_config(args, store)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    sys.exit(run_release(config, store))


def cmd_init(args):
    """Handle 'init' subcommand."""
    target = Path(args.path) if args.path else None
    success = init_config(target)
    sys.exit(EXIT_OK if success else EXIT_CONFIG_ERROR)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="release-pr",
        description="Create release merge pull requests across all configured projects"
    )
    parser.add_argument(
        "-V", "--tool-version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-c", "--config-file",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"YAML configuration file (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging, including GitHub API traffic"
    )
    parser.add_argument(
        "-y", "--automatic",
        action="store_true",
        help="Never prompt; all values must come from the config file, env or flags"
    )
    parser.add_argument(
        "--version",
        dest="release_version",
        type=str,
        help="Release version substituted into branch templates"
    )
    parser.add_argument(
        "--assignees",
        type=str,
        help="Comma separated pull request assignees"
    )
    parser.add_argument(
        "--owner",
        type=str,
        help="Repository owner or organization"
    )
    parser.add_argument(
        "--token",
        type=str,
        help="GitHub API token (default: GITHUB_TOKEN env var or config file)"
    )
    parser.add_argument(
        "--strict-assignees",
        action="store_true",
        help="Report a project as failed when its assignees cannot be attached"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("run", help="Create the release pull requests (default)")

    init_parser = subparsers.add_parser("init", help="Write a starter config file")
    init_parser.add_argument(
        "path",
        nargs="?",
        help=f"Target file or directory (default: {DEFAULT_CONFIG_FILE})"
    )

    return parser


def main():
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    # Route to subcommand
    if args.command == "init":
        cmd_init(args)
    else:
        cmd_run(args)


if __name__ == "__main__":
    main()
