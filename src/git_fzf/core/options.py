"""fzf 选项解析。

选项字符串中的 $NAME / ${NAME} 变量按各自的候选列表依次取第一个非空值；
所有无法解析的变量在一次扫描中收集完毕后统一报错。
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from git_fzf.core.config import (
    DEFAULT_FZF_BIND_OPTION,
    DEFAULT_FZF_OPTION,
    ENV_FZF_BIND_OPTION,
    ENV_FZF_OPTION,
    PREVIEW_OPTION_VARIABLE,
    FzfConfig,
)
from git_fzf.core.errors import UnresolvedOptionVariablesError
from git_fzf.core.templates import expand
from git_fzf.utils.logging import get_logger

logger = get_logger("options")

# $NAME 或 ${NAME}；单独的 "$" 按普通文本处理
VARIABLE_PATTERN = re.compile(r"\$(?:\{([A-Za-z0-9_]+)\}|([A-Za-z0-9_]+))")


@dataclass(frozen=True)
class OptionSource:
    """一个命名变量的候选值列表，按优先级排列。"""

    name: str
    candidates: tuple[str, ...]

    def resolve(self) -> Optional[str]:
        """返回第一个非空候选值；全部为空时返回 None。"""
        for candidate in self.candidates:
            if candidate:
                return candidate
        return None


def _select_option_template(
    environ: Mapping[str, str], config: FzfConfig
) -> tuple[str, str]:
    """选择选项字符串模板，返回 (模板, 来源名称)。"""
    env_option = environ.get(ENV_FZF_OPTION, "")
    if env_option:
        return env_option, ENV_FZF_OPTION
    if config.fzf_option:
        return config.fzf_option, "fzf_option"
    return DEFAULT_FZF_OPTION, "default fzf option"


def option_sources(
    preview_command: str, environ: Mapping[str, str], config: FzfConfig
) -> dict[str, OptionSource]:
    """构建选项字符串可引用的全部变量。"""
    return {
        # 预览命令只由程序注入
        PREVIEW_OPTION_VARIABLE: OptionSource(PREVIEW_OPTION_VARIABLE, (preview_command,)),
        ENV_FZF_BIND_OPTION: OptionSource(
            ENV_FZF_BIND_OPTION,
            (
                environ.get(ENV_FZF_BIND_OPTION, ""),
                config.fzf_bind_option,
                DEFAULT_FZF_BIND_OPTION,
            ),
        ),
    }


def resolve_fzf_option(
    preview_command: str,
    query: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
    config: Optional[FzfConfig] = None,
) -> str:
    """解析最终的 fzf 选项字符串。

    参数：
        preview_command：已渲染的预览命令
        query：fzf 初始查询；非空时追加 " --query <query>"（不做转义）
        environ：环境变量映射（默认 os.environ，只读）
        config：配置文件中的设置（默认空配置）

    返回：
        完整的 fzf 选项字符串

    异常：
        UnresolvedOptionVariablesError：存在无法解析的变量，列出全部变量名
    """
    env = os.environ if environ is None else environ
    cfg = config or FzfConfig()

    template, source = _select_option_template(env, cfg)
    sources = option_sources(preview_command, env, cfg)
    logger.debug("fzf option template from %s: %s", source, template)

    def _lookup(name: str) -> Optional[str]:
        option = sources.get(name)
        return option.resolve() if option else None

    resolved, missing = expand(template, VARIABLE_PATTERN, _lookup)
    if missing:
        raise UnresolvedOptionVariablesError(source, missing)

    if query:
        resolved = f"{resolved} --query {query}"
    return resolved
