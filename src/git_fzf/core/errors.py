"""git-fzf 的异常层次结构。

所有异常都继承自 GitFzfError。上层通过 add_context() 追加阶段与子命令信息，
异常类型保持不变，CLI 层统一捕获并输出到标准错误。
"""

from __future__ import annotations

from typing import Any


class GitFzfError(Exception):
    """git-fzf 所有错误的基础异常。"""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.context: list[str] = []

    def add_context(self, context: str) -> "GitFzfError":
        """在消息前追加上下文（例如子命令名、所处阶段），返回自身以便直接 raise。"""
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class ConfigError(GitFzfError):
    """配置文件无法读取或内容不合法。"""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, {"path": path} if path else None)
        self.path = path


class TemplateError(GitFzfError):
    """模板相关错误的基础异常。"""

    def __init__(self, message: str, template_name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
        self.template_name = template_name


class TemplateSyntaxError(TemplateError):
    """模板语法错误（占位符未闭合或名称非法）。"""

    def __init__(self, template_name: str, position: int, fragment: str) -> None:
        super().__init__(
            f"模板 {template_name!r} 语法错误：位置 {position} 处的占位符不合法：{fragment!r}",
            template_name,
            {"position": position, "fragment": fragment},
        )
        self.position = position
        self.fragment = fragment


class MissingTemplateKeyError(TemplateError):
    """模板引用了上下文中不存在的键。"""

    def __init__(self, template_name: str, keys: list[str]) -> None:
        super().__init__(
            f"模板 {template_name!r} 缺少键：{', '.join(keys)}",
            template_name,
            {"keys": keys},
        )
        self.keys = keys


class UnresolvedOptionVariablesError(GitFzfError):
    """fzf 选项字符串中存在无法解析的变量。"""

    def __init__(self, source: str, variables: list[str]) -> None:
        super().__init__(
            f"{source} 包含无法解析的变量：{','.join(variables)}",
            {"source": source, "variables": variables},
        )
        self.source = source
        self.variables = variables


class ProcessExecutionError(GitFzfError):
    """管道命令执行失败（非取消的非零退出，或进程无法启动）。"""

    def __init__(self, command: str, exit_code: int | None, cause: BaseException) -> None:
        super().__init__(
            f"命令执行失败 {command}：{cause}",
            {"command": command, "exit_code": exit_code},
        )
        self.command = command
        self.exit_code = exit_code
        self.cause = cause


class OutputParseError(GitFzfError):
    """fzf 输出行的字段数不足。"""

    def __init__(self, line: str, line_number: int, field_index: int) -> None:
        super().__init__(
            f"无法解析 fzf 输出第 {line_number} 行（需要第 {field_index} 列）：{line!r}",
            {"line": line, "line_number": line_number, "field_index": field_index},
        )
        self.line = line
        self.line_number = line_number
        self.field_index = field_index
