"""git-fzf diff 命令。"""

from typing import List, Optional

import typer

from git_fzf.commands._common import run_adapter
from git_fzf.core.pipeline import DIFF


def diff_command(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", "-q", help="以该查询启动 fzf"),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="透传给 git diff 的参数，第一个参数作为预览的对象范围",
        metavar=DIFF.usage,
    ),
) -> None:
    """用 fzf 选择变更文件，输出选中的路径。

    \b
    示例：
        git-fzf diff                        # 工作区变更
        git-fzf diff origin/master          # 与 origin/master 比较
        git-fzf diff HEAD~3..HEAD -q src    # 以查询 src 启动 fzf
        git add $(git-fzf diff)
    """
    run_adapter(ctx, DIFF, args or [], query)
