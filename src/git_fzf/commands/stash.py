"""git-fzf stash 命令。"""

from typing import List, Optional

import typer

from git_fzf.commands._common import run_adapter
from git_fzf.core.pipeline import STASH


def stash_command(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", "-q", help="以该查询启动 fzf"),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="透传给 git stash list 的参数",
        metavar=STASH.usage,
    ),
) -> None:
    """用 fzf 选择 stash 条目，输出选中的引用（如 stash@{0}）。

    \b
    示例：
        git-fzf stash
        git stash pop $(git-fzf stash)
    """
    run_adapter(ctx, STASH, args or [], query)
