"""git-fzf 版本常量（集中管理）。"""

from __future__ import annotations

__version__ = "0.2.0"
PACKAGE_VERSION = __version__
