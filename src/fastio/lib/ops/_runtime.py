"""Shared runtime resolution for operation handlers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fastio.lib.config._paths import resolve_project_root
from fastio.lib.config.settings import FastioConfig, load_config


@dataclass(frozen=True, slots=True)
class OperationRuntime:
    root: Path
    config: FastioConfig


def build_runtime(root: str | None) -> OperationRuntime:
    explicit = Path(root) if root is not None and root.strip() else None
    resolved_root = resolve_project_root(explicit)
    return OperationRuntime(root=resolved_root, config=load_config(resolved_root))
