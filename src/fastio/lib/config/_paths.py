"""Path resolution helpers for project-scoped config files."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR_NAME = ".fastio"
CONFIG_FILE_NAME = "config.toml"


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Resolve the project root that owns `.fastio/config.toml`.

    Precedence:
    1. Explicit function argument.
    2. `FASTIO_ROOT` environment variable.
    3. Current directory / ancestors containing `.fastio/`.
    4. Current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_root = os.getenv("FASTIO_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd().resolve()
    candidate = cwd
    while True:
        if (candidate / CONFIG_DIR_NAME).is_dir():
            return candidate

        # A .git entry marks a repo boundary; stop climbing there.
        if (candidate / ".git").exists():
            return candidate

        parent = candidate.parent
        if parent == candidate:
            break
        candidate = parent

    return cwd


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME
