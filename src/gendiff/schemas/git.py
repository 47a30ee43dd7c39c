from enum import Enum
from typing import Optional

from pydantic import BaseModel


class StatusTag(str, Enum):
    """Status codes printed by ``git status --short``."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "??"

    @classmethod
    def from_code(cls, code: str) -> Optional["StatusTag"]:
        """Return the tag for ``code``, or None when it is not a known code."""
        try:
            return cls(code)
        except ValueError:
            return None


class StatusLine(BaseModel):
    """One non-blank line of short-form status output."""

    tag: str
    path: str
    raw: str

    @property
    def status(self) -> Optional[StatusTag]:
        return StatusTag.from_code(self.tag)
