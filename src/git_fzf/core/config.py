"""git-fzf 的配置管理。

配置分三层，优先级从高到低：
1. 环境变量（GIT_FZF_FZF_OPTION / GIT_FZF_FZF_BIND_OPTION）
2. 用户配置文件 config.yaml（fzf_option / fzf_bind_option）
3. 内置默认值

预览命令变量 GIT_FZF_FZF_PREVIEW_OPTION 只能由程序注入，环境变量和配置文件都无法覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from git_fzf.core.errors import ConfigError

ENV_FZF_OPTION = "GIT_FZF_FZF_OPTION"
ENV_FZF_BIND_OPTION = "GIT_FZF_FZF_BIND_OPTION"
ENV_CONFIG_PATH = "GIT_FZF_CONFIG"
ENV_LOG_LEVEL = "GIT_FZF_LOG_LEVEL"

# 由程序注入的预览命令变量名（保留，不可由用户设置）
PREVIEW_OPTION_VARIABLE = "GIT_FZF_FZF_PREVIEW_OPTION"

DEFAULT_FZF_BIND_OPTION = (
    "ctrl-k:kill-line,ctrl-alt-t:toggle-preview,ctrl-alt-n:preview-down,"
    "ctrl-alt-p:preview-up,ctrl-alt-v:preview-page-down"
)
DEFAULT_FZF_OPTION = (
    "--multi --ansi --inline-info --layout reverse "
    f"--preview '${PREVIEW_OPTION_VARIABLE}' --preview-window down:70% "
    f"--bind ${ENV_FZF_BIND_OPTION}"
)


@dataclass
class FzfConfig:
    """配置文件中的 fzf 设置。

    属性：
        fzf_option：完整的 fzf 选项字符串模板（空字符串表示未设置）
        fzf_bind_option：--bind 子选项（空字符串表示未设置）
    """

    fzf_option: str = ""
    fzf_bind_option: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FzfConfig":
        """从字典创建实例。"""
        return cls(
            fzf_option=str(data.get("fzf_option") or ""),
            fzf_bind_option=str(data.get("fzf_bind_option") or ""),
        )


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """获取用户配置文件路径。

    优先使用 GIT_FZF_CONFIG，其次 $XDG_CONFIG_HOME/git-fzf/config.yaml，
    最后 ~/.config/git-fzf/config.yaml。
    """
    env = os.environ if environ is None else environ
    custom = env.get(ENV_CONFIG_PATH, "")
    if custom:
        return Path(custom).expanduser()
    config_home = env.get("XDG_CONFIG_HOME", "")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "git-fzf" / "config.yaml"


def load_config(config_path: Path) -> FzfConfig:
    """从 YAML 文件加载配置。

    参数：
        config_path：config.yaml 文件路径

    返回：
        加载后的 FzfConfig 实例（缺失字段使用默认值）

    异常：
        FileNotFoundError：配置文件不存在
        ConfigError：配置文件内容不合法
    """
    if not config_path.exists():
        raise FileNotFoundError(f"未找到配置文件：{config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"读取配置文件失败：{e}", str(config_path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"配置文件顶层必须是映射：{config_path}", str(config_path))

    return FzfConfig.from_dict(data)


def load_user_config(environ: Optional[Mapping[str, str]] = None) -> FzfConfig:
    """加载用户配置；配置文件不存在时返回默认配置。"""
    try:
        return load_config(get_config_path(environ))
    except FileNotFoundError:
        return FzfConfig()
