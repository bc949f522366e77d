"""Shared pytest fixtures for library and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

_FASTIO_ENV_VARS = (
    "FASTIO_ROOT",
    "FASTIO_MAX_ARGS",
    "FASTIO_FLOAT_FORMAT",
    "FASTIO_CACHE_SIZE",
    "FASTIO_PRINT_SEPARATOR",
    "FASTIO_PRINT_END",
)


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _clear_fastio_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _FASTIO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / ".fastio").mkdir(parents=True)
    return root


@pytest.fixture
def cli_env(package_root: Path, project_root: Path) -> dict[str, str]:
    env = {key: value for key, value in os.environ.items() if key not in _FASTIO_ENV_VARS}
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}:{existing}"
    env["FASTIO_ROOT"] = str(project_root)
    return env


@pytest.fixture
def run_fastio(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], timeout: float = 15.0) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "fastio", *args],
            cwd=package_root,
            env=cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
