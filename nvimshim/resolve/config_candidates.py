from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from nvimshim.core.environment import EnvironmentContext


def config_candidates(ctx: EnvironmentContext) -> list[Path]:
    # Priority order: script form first, declarative form second.
    return [ctx.init_lua_path(), ctx.init_vim_path()]


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def resolve_config(ctx: EnvironmentContext, exists: Callable[[Path], bool] | None = None) -> Path | None:
    check = exists or _is_readable_file
    for candidate in config_candidates(ctx):
        if check(candidate):
            return candidate
    return None
