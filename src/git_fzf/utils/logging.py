"""git-fzf 日志配置。

日志统一写到标准错误，标准输出只留给选中结果。
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

ROOT_LOGGER_NAME = "git_fzf"
DEFAULT_LEVEL = "warning"


class ConsoleFormatter(logging.Formatter):
    """带颜色的终端日志格式。"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%H:%M:%S")
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return f"{timestamp} {record.levelname:8s} [{record.name}] {message}"
        color = self.COLORS.get(record.levelname, "")
        return f"{color}{timestamp} {record.levelname:8s}{self.RESET} [{record.name}] {message}"


def get_logger(name: str) -> logging.Logger:
    """获取 git_fzf 命名空间下的 logger。"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    """配置 git_fzf 根 logger。

    参数：
        level：日志级别（debug/info/warning/error）；无法识别时回退到 warning
    """
    log_level = getattr(logging, level.strip().upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
    root_logger.addHandler(handler)

    root_logger.propagate = False
