"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from git_fzf import app
from git_fzf.core.config import (
    ENV_CONFIG_PATH,
    ENV_FZF_BIND_OPTION,
    ENV_FZF_OPTION,
    ENV_LOG_LEVEL,
    PREVIEW_OPTION_VARIABLE,
)
from git_fzf.utils.logging import ROOT_LOGGER_NAME
from helpers import FakeExecutor


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear git-fzf variables and point the config file at a path that does not exist."""
    for name in (
        ENV_FZF_OPTION,
        ENV_FZF_BIND_OPTION,
        ENV_LOG_LEVEL,
        PREVIEW_OPTION_VARIABLE,
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to CliRunner streams once a test finishes."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers = []
    root.setLevel(logging.NOTSET)


@pytest.fixture
def config_path(isolated_env: Path) -> Path:
    return isolated_env


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def invoke(cli_runner: CliRunner, executor: FakeExecutor):
    def _invoke(args: list[str]):
        return cli_runner.invoke(app, args, obj={"executor": executor})

    return _invoke


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    del config
    for item in items:
        path = Path(str(item.fspath))
        if "tests" not in path.parts:
            continue
        tests_index = path.parts.index("tests")
        if len(path.parts) <= tests_index + 1:
            continue
        group = path.parts[tests_index + 1]
        if group in {"unit", "cli"}:
            item.add_marker(getattr(pytest.mark, group))
