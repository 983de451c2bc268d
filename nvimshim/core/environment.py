from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


DEFAULT_XDG_SUBTREE = ".tests/xdg"

XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
XDG_STATE_HOME = "XDG_STATE_HOME"
XDG_DATA_HOME = "XDG_DATA_HOME"


@dataclass(frozen=True)
class EnvironmentContext:
    """
    Isolated XDG base directories for one adapter invocation.

    Every child process gets these three roots in its environment, so Neovim
    (and anything Neovim spawns, e.g. an embedded instance started from a test)
    never touches the caller's real config/state/data.
    """

    config_home: Path
    state_home: Path
    data_home: Path

    def nvim_config_dir(self) -> Path:
        return self.config_home / "nvim"

    def init_lua_path(self) -> Path:
        return self.nvim_config_dir() / "init.lua"

    def init_vim_path(self) -> Path:
        return self.nvim_config_dir() / "init.vim"

    def as_environ(self) -> dict[str, str]:
        return {
            XDG_CONFIG_HOME: str(self.config_home),
            XDG_STATE_HOME: str(self.state_home),
            XDG_DATA_HOME: str(self.data_home),
        }

    def child_environ(self, base: Mapping[str, str]) -> dict[str, str]:
        env = dict(base)
        env.update(self.as_environ())
        return env


def isolate(base_dir: Path, xdg_subtree: str | Path = DEFAULT_XDG_SUBTREE) -> EnvironmentContext:
    root = Path(xdg_subtree)
    if not root.is_absolute():
        root = Path(base_dir).resolve() / root
    return EnvironmentContext(
        config_home=root / "config",
        state_home=root / "state",
        data_home=root / "data",
    )
