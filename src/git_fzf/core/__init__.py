"""git-fzf 核心：模板渲染、选项解析、管道构建、结果提取。"""

from .errors import (
    ConfigError,
    GitFzfError,
    MissingTemplateKeyError,
    OutputParseError,
    ProcessExecutionError,
    TemplateError,
    TemplateSyntaxError,
    UnresolvedOptionVariablesError,
)
from .extractor import extract_fields
from .options import OptionSource, resolve_fzf_option
from .pipeline import DIFF, LOG, STASH, AdapterSpec, PipelineSpec, build_pipeline
from .runner import CANCELLED_EXIT_CODE, execute_pipeline, run_shell
from .templates import render_template

__all__ = [
    # 异常
    "GitFzfError",
    "ConfigError",
    "TemplateError",
    "TemplateSyntaxError",
    "MissingTemplateKeyError",
    "UnresolvedOptionVariablesError",
    "ProcessExecutionError",
    "OutputParseError",
    # 模板与选项
    "render_template",
    "OptionSource",
    "resolve_fzf_option",
    # 管道
    "AdapterSpec",
    "PipelineSpec",
    "DIFF",
    "LOG",
    "STASH",
    "build_pipeline",
    # 执行
    "CANCELLED_EXIT_CODE",
    "execute_pipeline",
    "run_shell",
    "extract_fields",
]
