"""各子命令的管道构建。

diff / log / stash 三个子命令只在数据上不同：列表命令、预览模板、预览上下文和输出列。
这些差异由 AdapterSpec 描述，构建流程只有一份。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from git_fzf.core.config import FzfConfig
from git_fzf.core.errors import GitFzfError
from git_fzf.core.options import resolve_fzf_option
from git_fzf.core.templates import render_template
from git_fzf.utils.logging import get_logger

logger = get_logger("pipeline")

FINDER_COMMAND = "fzf"
MAX_PASS_THROUGH_ARGS = 100

PreviewContextFactory = Callable[[str], dict[str, str]]


@dataclass(frozen=True)
class AdapterSpec:
    """子命令描述。

    属性：
        name：子命令名
        list_command：列出候选项的 git 命令（透传参数追加在其后）
        preview_template：fzf 预览命令模板
        preview_context：由对象范围（第一个透传参数）生成预览模板上下文
        field_index：从 fzf 输出中提取的列
        usage：参数用法说明
    """

    name: str
    list_command: str
    preview_template: str
    preview_context: PreviewContextFactory
    field_index: int
    usage: str = ""


@dataclass(frozen=True)
class PipelineSpec:
    """一次调用的完整管道。"""

    adapter: str
    list_command: str
    pass_through_args: tuple[str, ...]
    fzf_option: str
    field_index: int

    @property
    def command_line(self) -> str:
        """交给 shell 执行的完整命令行。"""
        return (
            f"{self.list_command} {' '.join(self.pass_through_args)} "
            f"| {FINDER_COMMAND} {self.fzf_option}"
        )


DIFF = AdapterSpec(
    name="diff",
    list_command="git diff --color --name-status",
    preview_template="git diff --color {{objectRange}} {{path}}",
    preview_context=lambda object_range: {"objectRange": object_range, "path": "{2}"},
    field_index=1,
    usage="[<commit>[..<commit>]] [-- <git options>]",
)

LOG = AdapterSpec(
    name="log",
    list_command="git log --color --oneline",
    preview_template="git show --color {{objectRange}} {{commit}}",
    preview_context=lambda object_range: {"objectRange": object_range, "commit": "{1}"},
    field_index=0,
    usage="[<commit>[..<commit>]] [-- <git options>]",
)

STASH = AdapterSpec(
    name="stash",
    list_command="git stash list --format='%gd %gs'",
    preview_template="git stash show --color -p '{{stash}}'",
    preview_context=lambda object_range: {"stash": "{1}"},
    field_index=0,
    usage="[-- <git options>]",
)


def object_range(pass_through_args: Sequence[str]) -> str:
    """取第一个透传参数作为对象范围。

    不做校验：第一个参数可能是 "A..B"、单个提交，也可能是 --diff-filter 这样的选项，
    是否合法由 git 判断。
    """
    return pass_through_args[0] if pass_through_args else ""


def build_pipeline(
    adapter: AdapterSpec,
    pass_through_args: Sequence[str],
    query: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
    config: Optional[FzfConfig] = None,
) -> PipelineSpec:
    """为子命令构建管道。

    参数：
        adapter：子命令描述
        pass_through_args：透传给 git 的参数
        query：fzf 初始查询
        environ：环境变量映射（默认 os.environ）
        config：配置文件中的设置

    返回：
        PipelineSpec

    异常：
        GitFzfError：预览模板渲染或选项解析失败（附带子命令与阶段信息）
    """
    args = tuple(pass_through_args)
    if len(args) > MAX_PASS_THROUGH_ARGS:
        raise GitFzfError(
            f"透传参数过多：{len(args)} 个（最多 {MAX_PASS_THROUGH_ARGS} 个）",
            {"count": len(args)},
        ).add_context(adapter.name)

    try:
        preview_command = render_template(
            "preview", adapter.preview_template, adapter.preview_context(object_range(args))
        )
    except GitFzfError as e:
        raise e.add_context(f"{adapter.name}: 预览命令无效")
    logger.debug("%s preview command: %s", adapter.name, preview_command)

    try:
        fzf_option = resolve_fzf_option(preview_command, query, environ=environ, config=config)
    except GitFzfError as e:
        raise e.add_context(f"{adapter.name}: 获取 fzf 选项失败")

    spec = PipelineSpec(
        adapter=adapter.name,
        list_command=adapter.list_command,
        pass_through_args=args,
        fzf_option=fzf_option,
        field_index=adapter.field_index,
    )
    logger.debug("%s command line: %s", adapter.name, spec.command_line)
    return spec
