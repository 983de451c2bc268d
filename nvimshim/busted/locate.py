from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Mapping

from nvimshim.config.shim_config import ShimConfig


LUA_SHIM_NAME = "nvimshim-lua"


class BustedNotFoundError(RuntimeError):
    pass


class LuaShimNotFoundError(RuntimeError):
    pass


def luarocks_bin_dirs(cfg: ShimConfig, environ: Mapping[str, str]) -> list[Path]:
    """
    Binary directories luarocks installs rock executables into.

    A missing or failing luarocks yields an empty list; the caller falls back
    to PATH.
    """
    try:
        proc = subprocess.run(
            [cfg.luarocks, "--lua-version", cfg.lua_version, "path", "--lr-bin"],
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            env=dict(environ),
            timeout=30,
        )
    except (OSError, subprocess.TimeoutExpired):
        return []
    if proc.returncode != 0:
        return []
    return [Path(p) for p in (proc.stdout or "").strip().split(os.pathsep) if p.strip()]


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_busted(cfg: ShimConfig, environ: Mapping[str, str]) -> Path:
    for d in luarocks_bin_dirs(cfg, environ):
        candidate = d / "busted"
        if _is_executable(candidate):
            return candidate
    found = shutil.which("busted", path=environ.get("PATH"))
    if found:
        return Path(found)
    raise BustedNotFoundError("busted not found (checked luarocks bin dirs and PATH)")


def find_lua_shim(environ: Mapping[str, str]) -> Path:
    """
    The lua adapter busted must use as its interpreter: PATH first, then the
    scripts directory of the running interpreter (an un-activated venv).
    """
    found = shutil.which(LUA_SHIM_NAME, path=environ.get("PATH"))
    if found:
        return Path(found)
    beside = Path(sys.executable).parent / LUA_SHIM_NAME
    if _is_executable(beside):
        return beside
    raise LuaShimNotFoundError(f"{LUA_SHIM_NAME} not found (checked PATH and {beside.parent}); busted would fall back to plain lua")
