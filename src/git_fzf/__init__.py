"""git-fzf：用 fzf 交互式选择 git 对象，并把选中的标识输出到标准输出。"""

import os

import typer
from rich.console import Console

from git_fzf.commands import diff as diff_cmd
from git_fzf.commands import log as log_cmd
from git_fzf.commands import stash as stash_cmd
from git_fzf.commands._common import PASS_THROUGH_CONTEXT
from git_fzf.core.config import ENV_LOG_LEVEL
from git_fzf.core.runner import run_shell
from git_fzf.utils.logging import DEFAULT_LEVEL, setup_logging
from git_fzf.version import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

app = typer.Typer(
    name="git-fzf",
    help="用 fzf 选择 git 对象",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="显示版本信息"),
    verbose: bool = typer.Option(False, "--verbose", help="输出调试日志到标准错误"),
) -> None:
    """git-fzf：用 fzf 选择 diff 文件、提交或 stash，结果可直接用于 $(git-fzf ...)。"""
    if version:
        console.print(f"[bold]git-fzf[/bold] 版本 {__version__}")
        raise typer.Exit()

    level = "debug" if verbose else (os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LEVEL)
    setup_logging(level)

    # 进程执行器通过上下文注入，测试可传入 obj={"executor": ...} 替换
    ctx.ensure_object(dict).setdefault("executor", run_shell)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# 注册命令
app.command(name="diff", context_settings=PASS_THROUGH_CONTEXT)(
    diff_cmd.diff_command
)
app.command(name="log", context_settings=PASS_THROUGH_CONTEXT)(
    log_cmd.log_command
)
app.command(name="stash", context_settings=PASS_THROUGH_CONTEXT)(
    stash_cmd.stash_command
)


def main() -> None:
    """CLI 入口。"""
    app()


if __name__ == "__main__":
    main()
