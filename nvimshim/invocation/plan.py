from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Sequence

from nvimshim.config.shim_config import ShimConfig
from nvimshim.core.environment import EnvironmentContext
from nvimshim.options.lua_options import OptionSet


MODE_VERSION = "version"
MODE_INLINE = "inline"
MODE_INTERPRETER = "interpreter"
MODE_PASSTHROUGH = "passthrough"
MODE_BUSTED = "busted"


@dataclass(frozen=True)
class InvocationPlan:
    """
    Fully resolved argv + environment for exactly one child process.

    The plan is never mutated after construction; `runner.process.run_plan`
    consumes it once.
    """

    mode: str
    args: tuple[str, ...]
    env: Mapping[str, str] = field(repr=False)

    def command_line(self) -> str:
        return " ".join(shlex.quote(x) for x in self.args)


def build_plan(mode: str, args: Sequence[str], env: Mapping[str, str]) -> InvocationPlan:
    return InvocationPlan(mode=mode, args=tuple(args), env=MappingProxyType(dict(env)))


def needs_config(options: OptionSet) -> bool:
    return not options.version and options.inline_expr is None


def build_lua_plan(
    cfg: ShimConfig,
    ctx: EnvironmentContext,
    options: OptionSet,
    config_path: Path | None,
    base_environ: Mapping[str, str],
) -> InvocationPlan:
    env = ctx.child_environ(base_environ)

    if options.version:
        return build_plan(MODE_VERSION, [cfg.nvim, "--version"], env)

    if options.inline_expr is not None:
        # `qa!` runs even when the expression errors, so the session never lingers.
        return build_plan(
            MODE_INLINE,
            [cfg.nvim, "--headless", "-c", f"lua {options.inline_expr}", "-c", "qa!"],
            env,
        )

    # `nvim -l` skips plugin loading unless asked; a bare `lua` would have had it.
    args = [cfg.nvim, "--cmd", "set loadplugins"]
    if config_path is not None:
        args.extend(["-u", str(config_path)])
    args.append("-l")
    args.extend(options.script_args)
    return build_plan(MODE_INTERPRETER, args, env)


def build_passthrough_plan(
    cfg: ShimConfig,
    ctx: EnvironmentContext,
    argv: Sequence[str],
    base_environ: Mapping[str, str],
) -> InvocationPlan:
    return build_plan(MODE_PASSTHROUGH, [cfg.nvim, *argv], ctx.child_environ(base_environ))


def build_busted_plan(
    busted: Path,
    lua_shim: Path,
    ctx: EnvironmentContext,
    argv: Sequence[str],
    base_environ: Mapping[str, str],
) -> InvocationPlan:
    args = [str(busted), "--lua", str(lua_shim), *argv]
    return build_plan(MODE_BUSTED, args, ctx.child_environ(base_environ))
