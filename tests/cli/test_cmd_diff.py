"""CLI tests for the diff command."""

import subprocess

from git_fzf.core.config import DEFAULT_FZF_BIND_OPTION, ENV_FZF_OPTION
from git_fzf.core.runner import CANCELLED_EXIT_CODE


class TestDiffCommand:
    """Tests for git-fzf diff."""

    def test_outputs_selected_paths(self, invoke, executor):
        executor.output = b"M\tREADME.md\nA\tLICENSE"
        result = invoke(["diff"])
        assert result.exit_code == 0
        assert result.output == "README.md\nLICENSE\n"

    def test_default_command_line(self, invoke, executor):
        executor.output = b"M\tREADME.md\n"
        invoke(["diff"])
        assert executor.calls == [
            "git diff --color --name-status  | fzf "
            "--multi --ansi --inline-info --layout reverse "
            "--preview 'git diff --color  {2}' --preview-window down:70% "
            f"--bind {DEFAULT_FZF_BIND_OPTION}"
        ]

    def test_pass_through_args_and_query(self, invoke, executor, monkeypatch):
        monkeypatch.setenv(ENV_FZF_OPTION, "--preview '$GIT_FZF_FZF_PREVIEW_OPTION'")
        executor.output = b"A\tnew.py\n"
        result = invoke(["diff", "-q", "config", "origin/master", "--diff-filter", "A"])
        assert result.exit_code == 0
        assert executor.calls == [
            "git diff --color --name-status origin/master --diff-filter A | fzf "
            "--preview 'git diff --color origin/master {2}' --query config"
        ]

    def test_double_dash_separator(self, invoke, executor, monkeypatch):
        monkeypatch.setenv(ENV_FZF_OPTION, "--inline-info")
        invoke(["diff", "--", "--cached"])
        assert executor.calls == ["git diff --color --name-status --cached | fzf --inline-info"]

    def test_cancel_prints_nothing(self, invoke, executor):
        executor.error = subprocess.CalledProcessError(CANCELLED_EXIT_CODE, "sh", output=b"M\tx\n")
        result = invoke(["diff"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_fzf_failure_exits_1(self, invoke, executor):
        executor.error = subprocess.CalledProcessError(2, "sh")
        result = invoke(["diff"])
        assert result.exit_code == 1
        assert "错误" in result.output
        assert "git diff --color --name-status" in result.output

    def test_invalid_option_variables_exit_1(self, invoke, executor, monkeypatch):
        monkeypatch.setenv(ENV_FZF_OPTION, "$UNKNOWN_ENV1, $UNKNOWN_ENV2")
        result = invoke(["diff"])
        assert result.exit_code == 1
        assert "UNKNOWN_ENV1,UNKNOWN_ENV2" in result.output
        assert executor.calls == []

    def test_invalid_config_file_exit_1(self, invoke, executor, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("fzf_option: [broken\n", encoding="utf-8")
        result = invoke(["diff"])
        assert result.exit_code == 1
        assert executor.calls == []

    def test_malformed_output_exit_1(self, invoke, executor):
        executor.output = b"README.md\n\n"
        result = invoke(["diff"])
        assert result.exit_code == 1
        assert "README.md" in result.output
        assert "diff: 解析 fzf 输出失败" in result.output
