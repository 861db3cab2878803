"""Tests for the CLI entry point."""

import os

import pytest
from click.testing import CliRunner

from textprep.core.cli import main
from textprep.core.utils.logging import setup_logging


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The group callback points loguru at the runner's stderr; undo that afterwards."""
    yield
    setup_logging()


@pytest.fixture
def no_config(tmp_dir):
    """Point --config at a file that does not exist, so built-in defaults apply."""
    return ["--config", os.path.join(tmp_dir, "absent.yaml")]


class TestCliGroup:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("tokenize", "purify", "shorten", "dedupe"):
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_log_level_is_case_insensitive(self, runner, no_config):
        result = runner.invoke(main, ["--log-level", "error", *no_config, "purify", "A B"])
        assert result.exit_code == 0
        assert result.stdout == "a-b\n"

    def test_unknown_log_level_is_a_usage_error(self, runner, no_config):
        result = runner.invoke(main, ["--log-level", "bogus", *no_config, "purify", "A B"])
        assert result.exit_code == 2
        assert "bogus" in result.output


class TestLogFile:
    def test_writes_to_configured_log_dir(self, runner, tmp_config_file, tmp_dir):
        args = ["--config", tmp_config_file, "--log-level", "DEBUG", "--log-file", "tokenize", "Der Hund"]
        result = runner.invoke(main, args)
        assert result.exit_code == 0
        assert "hund" in result.output.splitlines()

        setup_logging()  # close the file sink before reading
        with open(os.path.join(tmp_dir, "logs", "textprep.log"), encoding="utf-8") as f:
            assert "Loaded stop words" in f.read()

    def test_log_dir_defaults_under_data_dir(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "config.yaml")
        with open(path, "w") as f:
            f.write(f"paths:\n  data_dir: {tmp_dir}/data\n")
        result = runner.invoke(main, ["--config", path, "--log-file", "purify", "A B"])
        assert result.exit_code == 0
        setup_logging()
        assert os.path.isfile(os.path.join(tmp_dir, "data", "logs", "textprep.log"))

    def test_no_log_file_without_flag(self, runner, tmp_config_file, tmp_dir):
        result = runner.invoke(main, ["--config", tmp_config_file, "tokenize", "fox"])
        assert result.exit_code == 0
        assert not os.path.exists(os.path.join(tmp_dir, "logs"))

    def test_bad_config_is_reported(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "bad.yaml")
        with open(path, "w") as f:
            f.write("paths: [not, a, mapping]\n")
        result = runner.invoke(main, ["--config", path, "--log-file", "purify", "A B"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestTokenizeCommand:
    def test_fields(self, runner, no_config):
        result = runner.invoke(main, [*no_config, "tokenize", "the quick the fox", "<b>Quick</b> brown"])
        assert result.exit_code == 0
        assert result.output == "brown fox quick\n"

    def test_stdin(self, runner, no_config):
        result = runner.invoke(main, [*no_config, "tokenize"], input="Fox, fox & FOX\n")
        assert result.exit_code == 0
        assert result.output == "fox\n"

    def test_language_override(self, runner, no_config):
        result = runner.invoke(main, [*no_config, "tokenize", "--language", "ZZ", "the fox"])
        assert result.exit_code == 0
        assert result.output == "fox the\n"

    def test_config_file(self, runner, tmp_config_file):
        result = runner.invoke(main, ["--config", tmp_config_file, "tokenize", "Der Hund und die Katze"])
        assert result.exit_code == 0
        assert result.output == "hund katze\n"

    def test_bad_config_is_reported(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "bad.yaml")
        with open(path, "w") as f:
            f.write("text:\n  language: english\n")
        result = runner.invoke(main, ["--config", path, "tokenize", "fox"])
        assert result.exit_code == 1
        assert "two-letter" in result.output


class TestPurifyCommand:
    def test_default(self, runner, no_config):
        result = runner.invoke(main, [*no_config, "purify", "Hello, World"])
        assert result.output == "hello-world\n"

    def test_separator_and_legacy(self, runner, no_config):
        result = runner.invoke(main, [*no_config, "purify", "Hello, World", "--separator", "_", "--legacy"])
        assert result.output == "hello,_world\n"


class TestShortenCommand:
    def test_words(self, runner):
        result = runner.invoke(main, ["shorten", "<p>Hello World Example</p>", "--limit", "2", "--words", "--ellipsis"])
        assert result.exit_code == 0
        assert result.output == "Hello World...\n"

    def test_characters(self, runner):
        result = runner.invoke(main, ["shorten", "Hello World", "--limit", "5"])
        assert result.output == "Hello\n"

    def test_limit_required(self, runner):
        result = runner.invoke(main, ["shorten", "Hello"])
        assert result.exit_code == 2


class TestDedupeCommand:
    def test_first_occurrence_order(self, runner):
        result = runner.invoke(main, ["dedupe", "3", "1", "3", "2", "1"])
        assert result.output.splitlines() == ["3", "1", "2"]
