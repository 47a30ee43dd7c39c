"""Prints the content or diff of each changed file."""

from typing import List

from .. import console
from ..errors import CommandError, RenderError
from ..models import ProcessRunner
from ..schemas import StatusLine, StatusTag


class DiffReporter:
    """Renders status lines for a human reading the job log.

    Only added and modified files are rendered. Every other status, known or
    not, is left alone. File content and diffs go straight from the child
    process to the log, so their bytes are never decoded here. A failure
    while rendering is fatal.
    """

    def __init__(self, runner: ProcessRunner):
        self.runner = runner

    def describe(self, lines: List[StatusLine]) -> None:
        for line in lines:
            with console.group(line.raw):
                self.render(line)

    def render(self, line: StatusLine) -> None:
        status = line.status
        if status is StatusTag.ADDED:
            self._run("Show content of", line.path, ["cat", "--", line.path])
        elif status is StatusTag.MODIFIED:
            self._run("Show diff of", line.path, ["git", "diff", "@", "--", line.path])
        else:
            # Deletions, renames, copies, conflicts and unknown codes
            return

    def _run(self, what: str, file_path: str, command: List[str]) -> None:
        try:
            self.runner.run_inherited(command)
        except CommandError as e:
            raise RenderError(f"{what} {file_path}: {e}") from e
