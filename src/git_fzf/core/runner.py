"""管道执行。

命令通过注入的执行器运行；默认执行器用 sh -c 执行（支持管道），
标准输入与标准错误直接透传给 fzf，只捕获标准输出。
"""

from __future__ import annotations

import subprocess
from typing import IO, Any, Callable, Optional

from git_fzf.core.errors import OutputParseError, ProcessExecutionError
from git_fzf.core.extractor import extract_fields
from git_fzf.core.pipeline import PipelineSpec
from git_fzf.utils.logging import get_logger

logger = get_logger("runner")

# 在 fzf 中按 Ctrl-C 后 shell 返回的退出码
CANCELLED_EXIT_CODE = 130

Executor = Callable[[str, Optional[IO[Any]], Optional[IO[Any]]], bytes]


def run_shell(
    command_line: str,
    stdin: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> bytes:
    """用 sh 执行命令行并返回标准输出。

    stdin / stderr 为 None 时继承当前进程。

    异常：
        subprocess.CalledProcessError：命令以非零状态退出
        OSError：无法启动 shell
    """
    process = subprocess.run(
        ["sh", "-c", command_line],
        stdin=stdin,
        stdout=subprocess.PIPE,
        stderr=stderr,
        check=True,
    )
    return process.stdout


def execute_pipeline(
    spec: PipelineSpec,
    executor: Executor = run_shell,
    *,
    stdin: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> str:
    """执行管道并提取选中的标识。

    参数：
        spec：要执行的管道
        executor：进程执行器
        stdin / stderr：透传给执行器的标准输入与标准错误

    返回：
        要写到标准输出的文本；用户取消（退出码 130）时为空字符串

    异常：
        ProcessExecutionError：其他非零退出或进程无法启动
        OutputParseError：fzf 输出格式不符合预期
        （两者都带有子命令与阶段信息）
    """
    command_line = spec.command_line
    try:
        out = executor(command_line, stdin, stderr)
    except subprocess.CalledProcessError as e:
        if e.returncode == CANCELLED_EXIT_CODE:
            logger.debug("%s cancelled by user (exit %d)", spec.adapter, e.returncode)
            return ""
        raise ProcessExecutionError(command_line, e.returncode, e).add_context(
            f"{spec.adapter}: 执行失败"
        ) from e
    except OSError as e:
        raise ProcessExecutionError(command_line, None, e).add_context(
            f"{spec.adapter}: 执行失败"
        ) from e

    try:
        return extract_fields(out.decode("utf-8", errors="replace"), spec.field_index)
    except OutputParseError as e:
        raise e.add_context(f"{spec.adapter}: 解析 fzf 输出失败")
