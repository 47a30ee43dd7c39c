"""Git Manager protocol interface."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class GitManagerProtocol(Protocol):
    """Protocol for the git operations used by the checker."""

    @property
    def workspace(self) -> Path:
        """Repository working directory."""
        ...

    def add_safe_directory(self) -> None:
        """Trust the workspace in the global git configuration."""
        ...

    def stage_all(self) -> None:
        """Stage all changes, including untracked files."""
        ...

    def status_short(self) -> str:
        """Return short-form status output verbatim."""
        ...
