"""git-fzf 的模板处理模块。

提供单次变量替换原语 expand()，供两层模板共用：
- 预览命令模板：{{name}} 占位符，直接查上下文映射（render_template）
- fzf 选项字符串：$NAME / ${NAME} 变量，按候选列表回退（见 options 模块）
"""

from __future__ import annotations

import re
from typing import Callable, Mapping, Optional

from git_fzf.core.errors import MissingTemplateKeyError, TemplateSyntaxError

# 占位符格式：{{name}}，花括号内允许空白
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
PLACEHOLDER_OPEN = "{{"

Lookup = Callable[[str], Optional[str]]


def expand(text: str, pattern: re.Pattern[str], lookup: Lookup) -> tuple[str, list[str]]:
    """对 text 做一次变量替换。

    pattern 中最后一个命中的分组即变量名；lookup 返回 None 表示无法解析，
    此时以空字符串占位并继续扫描，以便一次收集全部缺失的名称。
    替换结果不会被再次扫描。

    参数：
        text：待替换的文本
        pattern：变量匹配正则
        lookup：变量名到值的解析策略

    返回：
        (替换后的文本, 未解析的变量名列表（按首次出现顺序去重）)
    """
    missing: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        name = match.group(match.lastindex or 0)
        value = lookup(name)
        if value is None:
            if name not in missing:
                missing.append(name)
            return ""
        return value

    return pattern.sub(_replace, text), missing


def check_syntax(name: str, text: str) -> None:
    """检查每个 "{{" 都开启了一个合法的占位符。

    异常：
        TemplateSyntaxError：占位符未闭合或名称非法
    """
    position = text.find(PLACEHOLDER_OPEN)
    while position != -1:
        match = PLACEHOLDER_PATTERN.match(text, position)
        if match is None:
            raise TemplateSyntaxError(name, position, text[position : position + 24])
        position = text.find(PLACEHOLDER_OPEN, match.end())


def render_template(
    name: str, text: str, context: Optional[Mapping[str, str]] = None
) -> str:
    """渲染模板（严格键策略）。

    参数：
        name：模板名称（用于错误信息）
        text：模板内容，占位符格式 {{name}}
        context：占位符名到值的映射

    返回：
        渲染后的文本

    异常：
        TemplateSyntaxError：模板语法不合法
        MissingTemplateKeyError：引用了 context 中不存在的键（不会返回部分结果）
    """
    check_syntax(name, text)
    values = context or {}
    rendered, missing = expand(text, PLACEHOLDER_PATTERN, values.get)
    if missing:
        raise MissingTemplateKeyError(name, missing)
    return rendered
