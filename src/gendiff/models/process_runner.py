import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Union

from ..errors import CommandError


class ProcessRunner:
    """Runs commands whose output goes straight to the job log."""

    def __init__(self, workspace: str):
        self.workspace = Path(workspace)

    def run_inherited(self, command: Union[str, List[str]]) -> None:
        """
        Run a command with stdout and stderr inherited from this process.

        A string is handed to the system shell, so pipelines and compound
        commands work. A list is executed directly.

        Raises:
            CommandError: the command exited non-zero or could not be started
        """
        if isinstance(command, str):
            display = command
            shell = True
        else:
            display = shlex.join(command)
            shell = False

        # Keep our own output ahead of the child's in the log
        sys.stdout.flush()
        try:
            result = subprocess.run(command, shell=shell, cwd=self.workspace)
        except OSError as e:
            raise CommandError(f"{display} could not be started: {e}") from e

        if result.returncode != 0:
            raise CommandError(f"{display} returned {result.returncode}")
