from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping

from nvimshim.config.shim_config import ShimConfig
from nvimshim.core.environment import isolate
from nvimshim.invocation.plan import build_passthrough_plan
from nvimshim.runner.process import run_plan, trace


def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    base_environ = os.environ if environ is None else environ

    cfg = ShimConfig.from_environ(base_environ, cwd=cwd)
    ctx = isolate(cfg.base_dir, cfg.xdg_subtree)
    plan = build_passthrough_plan(cfg, ctx, argv, base_environ)
    if cfg.trace:
        trace(plan)
    return run_plan(plan)


if __name__ == "__main__":
    raise SystemExit(main())
