from __future__ import annotations

import json
import sys

from nvimshim.config.shim_config import ShimConfig
from nvimshim.core.environment import isolate


_USAGE = """usage: python -m nvimshim {lua,nvim,busted,config} [args...]

  lua     run Neovim's embedded Lua as a standalone `lua` interpreter
  nvim    run Neovim with isolated XDG base directories
  busted  run the luarocks-installed busted through the lua adapter
  config  print the effective configuration as JSON
"""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        sys.stderr.write(_USAGE)
        return 2
    cmd, rest = argv[0], argv[1:]

    # Adapter arguments are forwarded untouched; argparse would try to parse them.
    if cmd == "lua":
        from nvimshim.lua.__main__ import main as lua_main

        return lua_main(rest)

    if cmd == "nvim":
        from nvimshim.nvim.__main__ import main as nvim_main

        return nvim_main(rest)

    if cmd == "busted":
        from nvimshim.busted.__main__ import main as busted_main

        return busted_main(rest)

    if cmd == "config":
        from nvimshim.resolve.config_candidates import resolve_config

        cfg = ShimConfig.from_environ()
        ctx = isolate(cfg.base_dir, cfg.xdg_subtree)
        config_path = resolve_config(ctx)
        out = {
            "config": cfg.to_json_obj(),
            "environment": ctx.as_environ(),
            "config_file": str(config_path) if config_path is not None else None,
        }
        print(json.dumps(out, ensure_ascii=False, indent=2, sort_keys=True))
        return 0

    sys.stderr.write(f"unknown adapter: {cmd}\n")
    sys.stderr.write(_USAGE)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
