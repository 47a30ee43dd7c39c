import argparse
from typing import List, Optional

from pydantic import ValidationError

from . import console
from .config.settings import get_settings
from .errors import ConfigError, GenDiffError
from .services import create_diff_checker_from_settings

DIFF_FOUND_MESSAGE = "Diff found!"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gendiff-check",
        description="Run a code-generation command and fail if it leaves uncommitted changes",
    )
    ap.add_argument("--command", default=None, help="Generation command (default: $INPUT_COMMAND)")
    ap.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print content or diff of each changed file (default: $INPUT_VERBOSE)",
    )
    ap.add_argument("--workspace", default=None, help="Repository directory (default: $GITHUB_WORKSPACE or cwd)")
    return ap


def run(argv: Optional[List[str]] = None) -> bool:
    """Check for a generated diff. Returns True if one was found."""
    with console.group("Get args"):
        args = build_parser().parse_args(argv)
        try:
            settings = get_settings()
        except ValidationError as e:
            raise ConfigError(f"Invalid input: {e}") from e

        overrides = {}
        if args.command is not None:
            overrides["INPUT_COMMAND"] = args.command
        if args.verbose is not None:
            overrides["INPUT_VERBOSE"] = args.verbose
        if args.workspace is not None:
            overrides["GITHUB_WORKSPACE"] = args.workspace
        settings = settings.model_copy(update=overrides)
        print(f"command: {settings.INPUT_COMMAND}")
        print(f"verbose: {settings.INPUT_VERBOSE}")

        checker = create_diff_checker_from_settings(settings)

    return checker.run()


def main(argv: Optional[List[str]] = None) -> int:
    try:
        diff_found = run(argv)
    except GenDiffError as e:
        console.error(str(e))
        return 1
    except Exception as e:
        console.error(f"{type(e).__name__}: {e}")
        return 1

    if diff_found:
        console.error(DIFF_FOUND_MESSAGE)
        return 1
    return 0
