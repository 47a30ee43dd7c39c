"""Schemas for the checker."""

from .git import StatusLine, StatusTag

__all__ = ["StatusLine", "StatusTag"]
