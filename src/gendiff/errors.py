"""Errors raised while checking for generated diffs.

Every error is fatal. They are caught once, in ``gendiff.main``, and turned
into a failed run whose message is the error text.
"""


class GenDiffError(Exception):
    """Base class for all checker errors."""


class ConfigError(GenDiffError):
    """Required input is missing or invalid."""


class SetupError(GenDiffError):
    """Marking the workspace as a safe directory failed."""


class CommandError(GenDiffError):
    """The generation command exited non-zero or could not be started."""


class StatusError(GenDiffError):
    """Staging changes or querying repository status failed."""


class RenderError(GenDiffError):
    """Printing a changed file's content or diff failed."""
