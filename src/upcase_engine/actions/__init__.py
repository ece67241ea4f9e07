"""High-level editing verbs reused across modes."""

from .upcase import run_upcase, upcase_buffer_action, upcase_selection_action

__all__ = [
    "run_upcase",
    "upcase_buffer_action",
    "upcase_selection_action",
]
