from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from nvimshim.core.environment import DEFAULT_XDG_SUBTREE


_TRUTHY = {"1", "true", "yes", "on"}


def _env_str(environ: Mapping[str, str], key: str, default: str) -> str:
    v = environ.get(key)
    if v is None or not v.strip():
        return default
    return v.strip()


@dataclass(frozen=True)
class ShimConfig:
    nvim: str
    base_dir: Path
    xdg_subtree: str
    luarocks: str
    lua_version: str
    trace: bool = False

    @staticmethod
    def default(base_dir: Path | None = None) -> "ShimConfig":
        return ShimConfig(
            nvim="nvim",
            base_dir=base_dir if base_dir is not None else Path.cwd(),
            xdg_subtree=DEFAULT_XDG_SUBTREE,
            luarocks="luarocks",
            lua_version="5.1",
            trace=False,
        )

    @staticmethod
    def from_environ(environ: Mapping[str, str] | None = None, cwd: Path | None = None) -> "ShimConfig":
        """
        Effective configuration: NVIMSHIM_* variables over built-in defaults.

        Empty values count as unset. `cwd` is only consulted when
        NVIMSHIM_BASE_DIR is not provided.
        """
        env = os.environ if environ is None else environ
        base = ShimConfig.default(base_dir=cwd)
        base_dir_raw = _env_str(env, "NVIMSHIM_BASE_DIR", "")
        cfg = ShimConfig(
            nvim=_env_str(env, "NVIMSHIM_NVIM", base.nvim),
            base_dir=Path(base_dir_raw) if base_dir_raw else base.base_dir,
            xdg_subtree=_env_str(env, "NVIMSHIM_XDG_ROOT", base.xdg_subtree),
            luarocks=_env_str(env, "NVIMSHIM_LUAROCKS", base.luarocks),
            lua_version=_env_str(env, "NVIMSHIM_LUA_VERSION", base.lua_version),
            trace=_env_str(env, "NVIMSHIM_TRACE", "").lower() in _TRUTHY,
        )
        cfg.validate()
        return cfg

    def validate(self) -> None:
        problems: list[str] = []
        if not self.nvim:
            problems.append("nvim executable must be a non-empty string")
        if not self.luarocks:
            problems.append("luarocks executable must be a non-empty string")
        if not str(self.xdg_subtree).strip():
            problems.append("xdg_subtree must be a non-empty path")
        if problems:
            raise ValueError("Invalid nvimshim configuration:\n" + "\n".join(problems))

    def to_json_obj(self) -> dict[str, Any]:
        return {
            "nvim": self.nvim,
            "base_dir": str(self.base_dir),
            "xdg_subtree": self.xdg_subtree,
            "luarocks": self.luarocks,
            "lua_version": self.lua_version,
            "trace": self.trace,
        }
