import pathlib
import re

import pytest
from click.testing import CliRunner

from password_checker.__main__ import cli

POLICY = """\
policy:
  min_length: 8
  require_number: true
  require_special_char: true
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config(tmp_path: pathlib.Path) -> pathlib.Path:
    fn = tmp_path / "policy.yaml"
    fn.write_text(POLICY)
    return fn


def test_check_passes(runner, config):
    result = runner.invoke(cli, ["-c", str(config), "check", "Ali@1234"])

    assert result.exit_code == 0, result.output
    assert "✔ at least 8 characters" in result.output
    assert "✔ at least one number" in result.output
    assert "✘" not in result.output


def test_check_reports_failed_rules(runner, config):
    result = runner.invoke(cli, ["-c", str(config), "check", "Ali@123"])

    assert result.exit_code == 1
    assert "✘ Password must be at least 8 characters long." in result.output
    assert "✔ at least one special character" in result.output
    assert "1 rule(s) failed" in result.output


def test_check_reads_stdin(runner, config):
    result = runner.invoke(
        cli, ["-c", str(config), "check", "--stdin"], input="Ali@1234\n"
    )

    assert result.exit_code == 0, result.output


def test_check_reads_only_first_stdin_line(runner, config, recwarn):
    result = runner.invoke(
        cli, ["-c", str(config), "check", "--stdin"], input="Ali@123\r\nAli@1234\n"
    )

    assert result.exit_code == 1
    assert "✘ Password must be at least 8 characters long." in result.output
    assert not [w for w in recwarn if "Click 9.0" in str(w.message)]


def test_check_prompts_for_password(runner, config):
    result = runner.invoke(cli, ["-c", str(config), "check"], input="short\n")

    assert result.exit_code == 1
    assert "Password must contain at least one number." in result.output


def test_check_quiet(runner, config):
    result = runner.invoke(cli, ["-c", str(config), "check", "-q", "abc"])

    assert result.exit_code == 1
    assert "✘" not in result.output


def test_check_rejects_password_and_stdin(runner, config):
    result = runner.invoke(cli, ["-c", str(config), "check", "--stdin", "abc"])

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_check_without_config_uses_environment(runner, monkeypatch):
    monkeypatch.setenv("PASSWORD_CHECKER_POLICY__MIN_LENGTH", "4")

    assert runner.invoke(cli, ["check", "abcd"]).exit_code == 0
    assert runner.invoke(cli, ["check", "abc"]).exit_code == 1


def test_invalid_yaml(runner, tmp_path):
    fn = tmp_path / "broken.yaml"
    fn.write_text("policy: [min_length: 8\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 1
    assert "Decoding failed for configuration file" in result.output
    assert re.search(r"\(line \d+, column \d+\)", result.output)


def test_invalid_policy(runner, tmp_path):
    fn = tmp_path / "invalid.yaml"
    fn.write_text("policy:\n  min_length: many\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 1
    assert "Invalid configuration input." in result.output
    assert "policy.min_length: Input must be a valid integer" in result.output


def test_non_mapping_config(runner, tmp_path):
    fn = tmp_path / "list.yaml"
    fn.write_text("- 1\n- 2\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 1
    assert "Input must be a valid mapping" in result.output


def test_config_with_non_string_keys(runner, tmp_path):
    fn = tmp_path / "int_keys.yaml"
    fn.write_text("1: foo\n")

    result = runner.invoke(cli, ["-c", str(fn), "check", "abc"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, TypeError)
    assert "Invalid configuration input." in result.output
    assert "<root>: Keys must be strings, got 1" in result.output


def test_help_does_not_load_config(runner):
    result = runner.invoke(cli, ["check", "--help"])

    assert result.exit_code == 0
    assert "Check a password against the configured policy." in result.output
