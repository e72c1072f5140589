"""Initialize a release-pr settings file."""

from pathlib import Path
from typing import Optional

from ..config import DEFAULT_CONFIG_FILE, ReleaseConfig, dump_config


HEADER = """# release-pr settings
#
# Branch templates use {version} as the placeholder for the release version.
# 'version', 'assignees' and 'token' are asked for interactively unless the
# generator runs with --automatic.
#
"""


def init_config(target: Optional[Path] = None) -> bool:
    """
    Write a starter settings file with the default projects.

    Creates:
      - release-pr.yaml (in target, or the current directory)

    An existing file is left untouched.
    """
    if target is None:
        target = Path(DEFAULT_CONFIG_FILE)
    elif target.is_dir():
        target = target / Path(DEFAULT_CONFIG_FILE).name

    if target.exists():
        print(f"Already exists: {target}")
        return True

    if not target.parent.exists():
        print(f"Error: {target.parent} does not exist")
        return False

    target.write_text(HEADER + dump_config(ReleaseConfig()), encoding="utf-8")
    print(f"Created: {target}")
    print("\nNext steps:")
    print(f"  1. Edit the projects in {target}")
    print("  2. Run: release-pr")

    return True
