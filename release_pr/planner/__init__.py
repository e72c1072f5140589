"""Planning: branch template expansion and request plan building."""

from .template import resolve
from .plan import (
    merge_project,
    build_plan,
    format_plan,
    confirm_plan,
    prepare_requests,
)

__all__ = [
    "resolve",
    "merge_project",
    "build_plan",
    "format_plan",
    "confirm_plan",
    "prepare_requests",
]
