"""Models for the checker."""

from .git_manager import GitManager
from .process_runner import ProcessRunner

__all__ = ["GitManager", "ProcessRunner"]
