"""CLI tests for the top-level application."""

import logging

from git_fzf import __version__
from git_fzf.utils.logging import ROOT_LOGGER_NAME


def test_version(invoke) -> None:
    result = invoke(["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_subcommands_listed_in_help(invoke) -> None:
    result = invoke(["--help"])
    assert result.exit_code == 0
    for name in ("diff", "log", "stash"):
        assert name in result.output


def test_verbose_enables_debug_logging(invoke, executor) -> None:
    executor.output = b"abc msg\n"
    invoke(["--verbose", "log"])
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_log_level_from_env(invoke, executor, monkeypatch) -> None:
    monkeypatch.setenv("GIT_FZF_LOG_LEVEL", "error")
    executor.output = b"abc msg\n"
    invoke(["log"])
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR
