"""Branch name template expansion."""

from ..models import VERSION_PLACEHOLDER


def resolve(template: str, version: str) -> str:
    """
    Substitute the release version into a branch name template.

    Every occurrence of the placeholder is replaced in a single pass, so a
    version that itself contains the placeholder is not expanded again.

    Args:
        template: Branch name template, e.g. "cv_dev_{version}"
        version: Release version, e.g. "3.2"

    Returns:
        The resolved branch name
    """
    return template.replace(VERSION_PLACEHOLDER, version)
