"""Config inspection operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastio.lib.config._paths import config_path
from fastio.lib.ops._runtime import build_runtime
from fastio.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from fastio.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    root: str
    path: str
    exists: bool
    max_args: int
    float_format: str
    cache_size: int
    separator: str
    end: str

    def format_text(self, ctx: FormatContext | None = None) -> str:
        from fastio.cli.format_helpers import kv_block

        return kv_block(
            [
                ("root", self.root),
                ("path", self.path if self.exists else f"{self.path} (not found, defaults)"),
                ("format.max_args", str(self.max_args)),
                ("format.float_format", repr(self.float_format)),
                ("format.cache_size", str(self.cache_size)),
                ("print.separator", repr(self.separator)),
                ("print.end", repr(self.end)),
            ]
        )


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    runtime = build_runtime(payload.root)
    path = config_path(runtime.root)
    config = runtime.config
    return ConfigShowOutput(
        root=runtime.root.as_posix(),
        path=path.as_posix(),
        exists=path.is_file(),
        max_args=config.format.max_args,
        float_format=config.format.float_format,
        cache_size=config.format.cache_size,
        separator=config.printing.separator,
        end=config.printing.end,
    )


operation(
    OperationSpec[ConfigShowInput, ConfigShowOutput](
        name="config.show",
        handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
        cli_group="config",
        cli_name="show",
        description="Show the resolved formatting config.",
    )
)
