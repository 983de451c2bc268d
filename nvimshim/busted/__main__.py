from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping

from nvimshim.busted.locate import BustedNotFoundError, LuaShimNotFoundError, find_busted, find_lua_shim
from nvimshim.config.shim_config import ShimConfig
from nvimshim.core.environment import isolate
from nvimshim.invocation.plan import build_busted_plan
from nvimshim.runner.process import EXIT_NOT_FOUND, run_plan, trace


def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the luarocks-installed busted with nvimshim-lua as its interpreter."""
    argv = list(sys.argv[1:] if argv is None else argv)
    base_environ = os.environ if environ is None else environ

    cfg = ShimConfig.from_environ(base_environ, cwd=cwd)
    ctx = isolate(cfg.base_dir, cfg.xdg_subtree)
    try:
        busted = find_busted(cfg, base_environ)
        lua_shim = find_lua_shim(base_environ)
    except (BustedNotFoundError, LuaShimNotFoundError) as e:
        sys.stderr.write(f"nvimshim: {e}\n")
        return EXIT_NOT_FOUND

    plan = build_busted_plan(busted, lua_shim, ctx, argv, base_environ)
    if cfg.trace:
        trace(plan)
    return run_plan(plan)


if __name__ == "__main__":
    raise SystemExit(main())
