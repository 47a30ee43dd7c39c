"""Runs a generation command and checks whether it changed the repository."""

from git.exc import GitCommandError, GitCommandNotFound

from .. import console
from ..errors import SetupError, StatusError
from ..models import ProcessRunner
from ..protocols.git_manager_protocol import GitManagerProtocol
from .diff_reporter import DiffReporter
from .status_parser import parse_status_lines


class DiffChecker:
    """Prepare, run, stage, inspect and optionally report, in that order.

    The first failing step raises and nothing after it runs. The safe.directory
    entry added by ``prepare_repository`` is written once per checker and is
    meant to last for the rest of the process run; it is never removed.
    """

    def __init__(
        self,
        git_manager: GitManagerProtocol,
        runner: ProcessRunner,
        command: str,
        verbose: bool = False,
    ):
        self.git_manager = git_manager
        self.runner = runner
        self.command = command
        self.verbose = verbose
        self.reporter = DiffReporter(runner)
        self._prepared = False

    def run(self) -> bool:
        """Run every step. Returns True if the command left a diff behind."""
        with console.group("Setup repository"):
            self.prepare_repository()
        with console.group("Execute command"):
            self.execute_command()
        with console.group("Diff action"):
            return self.diff_action()

    def prepare_repository(self) -> None:
        if self._prepared:
            return
        try:
            self.git_manager.add_safe_directory()
        except (GitCommandError, GitCommandNotFound) as e:
            raise SetupError(f"Setup repository: {e}") from e
        self._prepared = True

    def execute_command(self) -> None:
        print(f"Running: {self.command}")
        self.runner.run_inherited(self.command)

    def inspect_status(self) -> str:
        """Stage everything and return ``git status --short`` output."""
        try:
            self.git_manager.stage_all()
        except (GitCommandError, GitCommandNotFound) as e:
            raise StatusError(f"git add -A: {e}") from e
        try:
            return self.git_manager.status_short()
        except (GitCommandError, GitCommandNotFound) as e:
            raise StatusError(f"git status: {e}") from e

    def diff_action(self) -> bool:
        stdout = self.inspect_status()
        if stdout == "":
            print("No diff found")
            return False

        lines = parse_status_lines(stdout)
        print(f"{len(lines)} changed file(s)")
        if self.verbose:
            self.reporter.describe(lines)
        return True
