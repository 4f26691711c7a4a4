"""Test helper utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Optional

import yaml


def write_yaml(path: Path, data: Any) -> None:
    """Write YAML content to a path."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


@dataclass
class FakeExecutor:
    """Process executor double that records command lines instead of spawning them."""

    output: bytes = b""
    error: Optional[BaseException] = None
    calls: list[str] = field(default_factory=list)

    def __call__(
        self,
        command_line: str,
        stdin: Optional[IO[Any]] = None,
        stderr: Optional[IO[Any]] = None,
    ) -> bytes:
        self.calls.append(command_line)
        if self.error is not None:
            raise self.error
        return self.output
