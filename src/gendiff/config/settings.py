from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Checker settings loaded from environment variables.

    GitHub Actions passes each action input as an ``INPUT_<NAME>`` variable and
    the checkout location as ``GITHUB_WORKSPACE``, so the field names here are
    exactly those variable names. Command-line flags of ``gendiff-check`` take
    precedence over these values.
    """

    # Action inputs
    INPUT_COMMAND: str = ""
    INPUT_VERBOSE: bool = False

    # Repository checkout. Actions always sets it; when it is empty (local
    # runs) the current directory is used instead, and a path that is not a
    # directory fails setup. See checker_factory.resolve_workspace.
    GITHUB_WORKSPACE: str = ""

    @field_validator("INPUT_VERBOSE", mode="before")
    @classmethod
    def empty_means_false(cls, value):
        # Unset action inputs arrive as empty strings
        if isinstance(value, str) and not value.strip():
            return False
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
