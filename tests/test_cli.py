"""
Tests for the semlex Command-Line Tool
======================================

Covers token output, diagnostics, JSON Lines output, stdin input,
configuration from the environment, and exit codes.

Run tests with:
    pytest tests/test_cli.py -v
"""

import json

import pytest
from click.testing import CliRunner

from semrange import __version__
from semrange.cli import semlex
from semrange.cli.errors import ExitCode, handle_cli_exception
from semrange.cli.semlex import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def env():
    """Environment that neutralises configuration variables."""
    return {"SEMRANGE_COLOR": None, "NO_COLOR": None, "SEMRANGE_FORMAT": None}


# =============================================================================
# Basic Invocation
# =============================================================================

class TestBasics:

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Tokenize semantic-version range expressions" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_format(self, runner, env):
        result = runner.invoke(main, ["-f", "yaml", "1"], env=env)
        assert result.exit_code == ExitCode.INVALID_ARGS


# =============================================================================
# Text Output
# =============================================================================

class TestTextOutput:

    def test_tokens_one_per_line(self, runner, env):
        result = runner.invoke(main, [">=1.2"], env=env)
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output.splitlines() == [
            "OPERATOR >= @2",
            "NUMBER 1 @3",
            "DOT . @4",
            "NUMBER 2 @5",
        ]

    def test_blank_line_between_expressions(self, runner, env):
        result = runner.invoke(main, ["^1", "~2"], env=env)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "CARET ^ @1",
            "NUMBER 1 @2",
            "",
            "TILDE ~ @1",
            "NUMBER 2 @2",
        ]

    def test_diagnostic_plain(self, runner, env):
        result = runner.invoke(main, ["--no-color", "1.2!.3"], env=env)
        assert result.exit_code == ExitCode.LEX_ERROR
        assert 'Unexpected character "!" @ 3:' in result.output
        assert "  1.2!.3" in result.output
        assert "\n     ^" in result.output
        assert "\x1b[" not in result.output

    def test_diagnostic_color(self, runner, env):
        result = runner.invoke(main, ["--color", "1.2!.3"], env=env)
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "\x1b[" in result.output

    def test_color_from_environment(self, runner, env):
        env["SEMRANGE_COLOR"] = "1"
        result = runner.invoke(main, ["1.2!.3"], env=env)
        assert "\x1b[" in result.output

    def test_no_leading_blank_line_after_failure(self, runner, env):
        result = runner.invoke(main, ["--no-color", "!", "^1", "?", "~2"], env=env)
        assert result.exit_code == ExitCode.LEX_ERROR
        assert result.stdout.splitlines() == [
            "CARET ^ @1",
            "NUMBER 1 @2",
            "",
            "TILDE ~ @1",
            "NUMBER 2 @2",
        ]

    def test_mixed_success_and_failure(self, runner, env):
        result = runner.invoke(main, ["--no-color", "^1", "?"], env=env)
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "CARET ^ @1" in result.output
        assert 'Unexpected character "?" @ 0:' in result.output


# =============================================================================
# JSON Output
# =============================================================================

class TestJsonOutput:

    def test_json_lines(self, runner, env):
        result = runner.invoke(main, ["-f", "json", "~1", "1!"], env=env)
        assert result.exit_code == ExitCode.LEX_ERROR

        lines = [json.loads(line) for line in result.output.splitlines()]
        assert lines[0] == {
            "input": "~1",
            "tokens": [
                {"kind": "TILDE", "pos": 1, "value": "~"},
                {"kind": "NUMBER", "pos": 2, "value": "1"},
            ],
        }
        assert lines[1]["input"] == "1!"
        assert lines[1]["error"] == {
            "kind": "UnexpectedCharacter",
            "reason": "Unexpected character",
            "char": "!",
            "column": 1,
            "input": "1!",
        }

    def test_json_format_from_environment(self, runner, env):
        env["SEMRANGE_FORMAT"] = "json"
        result = runner.invoke(main, ["^1"], env=env)
        assert result.exit_code == 0
        assert json.loads(result.output)["tokens"][0]["kind"] == "CARET"

    def test_empty_expression(self, runner, env):
        result = runner.invoke(main, ["-f", "json", ""], env=env)
        assert result.exit_code == 0
        assert json.loads(result.output) == {"input": "", "tokens": []}


# =============================================================================
# Stdin Input
# =============================================================================

class TestStdin:

    def test_dash_reads_stdin(self, runner, env):
        result = runner.invoke(main, ["-f", "json", "-"], input="^1\n>=2\n", env=env)
        assert result.exit_code == 0
        inputs = [json.loads(line)["input"] for line in result.output.splitlines()]
        assert inputs == ["^1", ">=2"]

    def test_no_arguments_reads_stdin(self, runner, env):
        result = runner.invoke(main, [], input="1.0\r\n", env=env)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "NUMBER 1 @1",
            "DOT . @2",
            "NUMBER 0 @3",
        ]

    def test_undecodable_stdin_is_invalid_input(self, runner, env):
        result = runner.invoke(main, ["-"], input=b"1.\xff\n", env=env)
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Error:" in result.output
        assert "Internal error" not in result.output

    def test_stdin_failure_exit_code(self, runner, env):
        result = runner.invoke(main, ["--no-color"], input="1\n2 & 3\n", env=env)
        assert result.exit_code == ExitCode.LEX_ERROR
        assert 'Unexpected character "&" @ 2:' in result.output


# =============================================================================
# Error Handling
# =============================================================================

class TestErrorHandling:

    def test_internal_error(self, runner, env, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(semlex, "tokenize", explode)
        result = runner.invoke(main, ["1"], env=env)
        assert result.exit_code == ExitCode.INTERNAL_ERROR
        assert "Internal error: boom" in result.output

    @pytest.mark.parametrize("error, code", [
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), ExitCode.INVALID_ARGS),
        (FileNotFoundError("ranges.txt"), ExitCode.INVALID_ARGS),
        (RuntimeError("boom"), ExitCode.INTERNAL_ERROR),
    ])
    def test_handler_exit_codes(self, error, code):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error)
        assert exc_info.value.code == code
