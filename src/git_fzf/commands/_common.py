"""子命令共用的执行流程。"""

from __future__ import annotations

from typing import Sequence

import typer
from rich.console import Console
from rich.markup import escape

from git_fzf.core.config import load_user_config
from git_fzf.core.errors import GitFzfError
from git_fzf.core.pipeline import AdapterSpec, build_pipeline
from git_fzf.core.runner import execute_pipeline, run_shell

err_console = Console(stderr=True)

# 允许 --diff-filter 等未知选项作为透传参数
PASS_THROUGH_CONTEXT = {"ignore_unknown_options": True, "allow_extra_args": True}


def run_adapter(
    ctx: typer.Context,
    adapter: AdapterSpec,
    args: Sequence[str],
    query: str,
) -> None:
    """构建并执行子命令管道，把选中结果写到标准输出。

    进程执行器从 ctx.obj["executor"] 获取（由主回调注入）。
    失败时错误信息写到标准错误并以退出码 1 结束；用户取消时不输出任何内容。
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    executor = obj.get("executor", run_shell)

    try:
        config = load_user_config()
        spec = build_pipeline(adapter, args, query, config=config)
        output = execute_pipeline(spec, executor)
    except GitFzfError as e:
        err_console.print(f"[red]错误：[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if output:
        typer.echo(output, nl=False)
