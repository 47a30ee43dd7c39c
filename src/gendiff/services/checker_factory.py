"""Factory for creating DiffChecker instances."""

from pathlib import Path

from ..config.settings import Settings
from ..errors import ConfigError, SetupError
from ..models import GitManager, ProcessRunner
from .diff_checker import DiffChecker


def resolve_workspace(workspace: str) -> str:
    """
    Return the absolute workspace path.

    Args:
        workspace: Configured path; empty means the current directory

    Raises:
        SetupError: the path does not exist or is not a directory
    """
    path = Path(workspace) if workspace.strip() else Path.cwd()
    if not path.is_dir():
        raise SetupError(f"Setup repository: workspace {path} is not a directory")
    return str(path.resolve())


def create_diff_checker(
    command: str,
    workspace: str = "",
    verbose: bool = False,
) -> DiffChecker:
    """
    Create a DiffChecker wired to the real git and subprocess runners.

    Args:
        command: Generation command, run through the shell
        workspace: Repository directory; empty means the current directory
        verbose: If True, print content or diff of each changed file

    Returns:
        DiffChecker ready to run
    """
    if not command.strip():
        raise ConfigError("Input required and not supplied: command")

    path = resolve_workspace(workspace)
    return DiffChecker(
        git_manager=GitManager(path),
        runner=ProcessRunner(path),
        command=command,
        verbose=verbose,
    )


def create_diff_checker_from_settings(settings: Settings) -> DiffChecker:
    """
    Create a DiffChecker using settings read from the environment.

    Args:
        settings: Checker settings

    Returns:
        DiffChecker ready to run
    """
    return create_diff_checker(
        command=settings.INPUT_COMMAND,
        workspace=settings.GITHUB_WORKSPACE,
        verbose=settings.INPUT_VERBOSE,
    )
