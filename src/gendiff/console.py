"""GitHub Actions workflow commands written to stdout."""

from contextlib import contextmanager
from typing import Iterator


def escape_data(message: str) -> str:
    """Escape a message for use as workflow-command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold everything printed inside the block under ``title``.

    The group is closed even when the block raises.
    """
    print(f"::group::{escape_data(title)}", flush=True)
    try:
        yield
    finally:
        print("::endgroup::", flush=True)


def error(message: str) -> None:
    """Emit an error annotation for the job."""
    print(f"::error::{escape_data(message)}", flush=True)
