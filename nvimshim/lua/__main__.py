from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping

from nvimshim.config.shim_config import ShimConfig
from nvimshim.core.environment import isolate
from nvimshim.invocation.plan import build_lua_plan, needs_config
from nvimshim.options.lua_options import OptionError, UnsupportedOptionError, parse_lua_options
from nvimshim.resolve.config_candidates import resolve_config
from nvimshim.runner.process import run_plan, trace


def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> int:
    """
    Stand in for the `lua` interpreter by running Neovim's embedded Lua.

    `environ`/`cwd` default to the real process environment and working
    directory; tests pass their own so nothing ambient is mutated.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    base_environ = os.environ if environ is None else environ

    cfg = ShimConfig.from_environ(base_environ, cwd=cwd)
    ctx = isolate(cfg.base_dir, cfg.xdg_subtree)

    try:
        options = parse_lua_options(argv)
        options.ensure_supported()
    except UnsupportedOptionError as e:
        sys.stderr.write(f"{e}\n")
        return 1
    except OptionError as e:
        sys.stderr.write(f"lua: {e}\n")
        return 1

    config_path = resolve_config(ctx) if needs_config(options) else None
    plan = build_lua_plan(cfg, ctx, options, config_path, base_environ)
    if cfg.trace:
        if needs_config(options):
            sys.stderr.write(f"[nvimshim] config: {config_path or 'none'}\n")
        trace(plan)
    return run_plan(plan)


if __name__ == "__main__":
    raise SystemExit(main())
