from pathlib import Path

from git import Git


class GitManager:
    """Runs the git commands the checker needs inside the workspace.

    Every call captures git's output. Failures surface as GitPython's
    ``GitCommandError`` (non-zero exit) or ``GitCommandNotFound`` (no git
    binary); callers decide which checker error they become.
    """

    def __init__(self, workspace: str):
        self.workspace = Path(workspace)
        self.git = Git(str(self.workspace))

    def add_safe_directory(self) -> None:
        """Add the workspace to the global ``safe.directory`` list."""
        self.git.config("--global", "--add", "safe.directory", str(self.workspace))
        print(f"Marked {self.workspace} as a safe directory")

    def stage_all(self) -> None:
        """Stage every change, tracked and untracked."""
        self.git.add("-A")

    def status_short(self) -> str:
        """Return the output of ``git status --short``."""
        return self.git.status("--short")
