"""Command line helpers: interactive prompts and the init command."""

from .init_cmd import init_config
from .prompts import ask_text, ask_list, ask_yes_no, collect_settings

__all__ = [
    "init_config",
    "ask_text",
    "ask_list",
    "ask_yes_no",
    "collect_settings",
]
