"""Fail a CI run when a code-generation command leaves uncommitted changes."""

__version__ = "0.1.0"
