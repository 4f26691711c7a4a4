"""git-fzf log 命令。"""

from typing import List, Optional

import typer

from git_fzf.commands._common import run_adapter
from git_fzf.core.pipeline import LOG


def log_command(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", "-q", help="以该查询启动 fzf"),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="透传给 git log 的参数，第一个参数作为预览的对象范围",
        metavar=LOG.usage,
    ),
) -> None:
    """用 fzf 选择提交，输出选中的提交哈希。

    \b
    示例：
        git-fzf log
        git-fzf log origin/master..HEAD
        git show $(git-fzf log)
    """
    run_adapter(ctx, LOG, args or [], query)
