"""Unit tests for the command-line entry point."""

from unittest.mock import Mock, patch

import pytest

from gendiff.config import get_settings
from gendiff.errors import CommandError, StatusError
from gendiff.main import DIFF_FOUND_MESSAGE, main


@pytest.fixture(autouse=True)
def action_env(monkeypatch, tmp_path):
    monkeypatch.setenv("INPUT_COMMAND", "make generate")
    monkeypatch.setenv("INPUT_VERBOSE", "false")
    monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestMain:
    """Test cases for main()."""

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_no_diff_succeeds(self, mock_create, capsys):
        """Test a clean run exits 0 without an error annotation."""
        mock_create.return_value = Mock(run=Mock(return_value=False))

        assert main([]) == 0
        assert "::error::" not in capsys.readouterr().out

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_diff_found_fails(self, mock_create, capsys):
        """Test a diff exits 1 with the diff-found message."""
        mock_create.return_value = Mock(run=Mock(return_value=True))

        assert main([]) == 1
        assert f"::error::{DIFF_FOUND_MESSAGE}" in capsys.readouterr().out

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_step_error_fails_with_message(self, mock_create, capsys):
        """Test a step failure exits 1 with that step's message."""
        mock_create.return_value = Mock(
            run=Mock(side_effect=CommandError("make generate returned 2"))
        )

        assert main([]) == 1
        out = capsys.readouterr().out
        assert "::error::make generate returned 2" in out
        assert DIFF_FOUND_MESSAGE not in out

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_settings_from_environment(self, mock_create, tmp_path):
        """Test environment inputs reach the factory."""
        mock_create.return_value = Mock(run=Mock(return_value=False))

        main([])

        settings = mock_create.call_args.args[0]
        assert settings.INPUT_COMMAND == "make generate"
        assert settings.INPUT_VERBOSE is False
        assert settings.GITHUB_WORKSPACE == str(tmp_path)

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_flags_override_environment(self, mock_create, tmp_path):
        """Test command-line flags win over the environment."""
        mock_create.return_value = Mock(run=Mock(return_value=False))
        other = tmp_path / "other"
        other.mkdir()

        main(["--command", "buf generate", "--verbose", "--workspace", str(other)])

        settings = mock_create.call_args.args[0]
        assert settings.INPUT_COMMAND == "buf generate"
        assert settings.INPUT_VERBOSE is True
        assert settings.GITHUB_WORKSPACE == str(other)

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_no_verbose_flag(self, mock_create, monkeypatch):
        """Test --no-verbose turns off verbose mode set in the environment."""
        monkeypatch.setenv("INPUT_VERBOSE", "true")
        mock_create.return_value = Mock(run=Mock(return_value=False))

        main(["--no-verbose"])

        assert mock_create.call_args.args[0].INPUT_VERBOSE is False

    def test_missing_command_fails(self, monkeypatch, capsys):
        """Test an empty command is reported as a failure."""
        monkeypatch.setenv("INPUT_COMMAND", "")

        assert main([]) == 1
        assert "Input required and not supplied: command" in capsys.readouterr().out

    def test_invalid_verbose_fails(self, monkeypatch, capsys):
        """Test an invalid verbose input is reported as a failure."""
        monkeypatch.setenv("INPUT_VERBOSE", "sometimes")

        assert main([]) == 1
        assert "::error::Invalid input" in capsys.readouterr().out

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_unexpected_error_fails_with_message(self, mock_create, capsys):
        """Test errors outside the checker taxonomy still end in an annotation."""
        mock_create.return_value = Mock(
            run=Mock(side_effect=UnicodeEncodeError("utf-8", "\udce9", 0, 1, "surrogates not allowed"))
        )

        assert main([]) == 1
        out = capsys.readouterr().out
        assert "::error::UnicodeEncodeError: " in out
        assert DIFF_FOUND_MESSAGE not in out

    @patch("gendiff.main.create_diff_checker_from_settings")
    def test_status_error(self, mock_create, capsys):
        """Test status failures are distinct from a found diff."""
        mock_create.return_value = Mock(run=Mock(side_effect=StatusError("git status: x")))

        assert main([]) == 1
        assert "::error::git status: x" in capsys.readouterr().out
