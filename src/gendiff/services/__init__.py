"""Services for the checker."""

from .checker_factory import (
    create_diff_checker,
    create_diff_checker_from_settings,
)
from .diff_checker import DiffChecker
from .diff_reporter import DiffReporter
from .status_parser import parse_status_lines

__all__ = [
    "DiffChecker",
    "DiffReporter",
    "create_diff_checker",
    "create_diff_checker_from_settings",
    "parse_status_lines",
]
