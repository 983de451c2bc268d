from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from nvimshim.core.environment import EnvironmentContext, isolate
from nvimshim.resolve.config_candidates import config_candidates, resolve_config


def _ctx() -> EnvironmentContext:
    return EnvironmentContext(config_home=Path("/x/config"), state_home=Path("/x/state"), data_home=Path("/x/data"))


class ConfigResolutionTests(unittest.TestCase):
    def test_candidate_order_is_script_then_declarative(self) -> None:
        self.assertEqual(
            config_candidates(_ctx()),
            [Path("/x/config/nvim/init.lua"), Path("/x/config/nvim/init.vim")],
        )

    def test_script_form_wins_when_both_exist(self) -> None:
        present = {Path("/x/config/nvim/init.lua"), Path("/x/config/nvim/init.vim")}
        self.assertEqual(resolve_config(_ctx(), exists=present.__contains__), Path("/x/config/nvim/init.lua"))

    def test_declarative_form_used_when_alone(self) -> None:
        present = {Path("/x/config/nvim/init.vim")}
        self.assertEqual(resolve_config(_ctx(), exists=present.__contains__), Path("/x/config/nvim/init.vim"))

    def test_neither_present_is_not_an_error(self) -> None:
        self.assertIsNone(resolve_config(_ctx(), exists=lambda p: False))

    def test_probes_stop_at_first_match(self) -> None:
        probed: list[Path] = []

        def exists(p: Path) -> bool:
            probed.append(p)
            return True

        resolve_config(_ctx(), exists=exists)
        self.assertEqual(probed, [Path("/x/config/nvim/init.lua")])

    def test_real_filesystem(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            ctx = isolate(Path(td))
            self.assertIsNone(resolve_config(ctx))

            ctx.nvim_config_dir().mkdir(parents=True)
            ctx.init_vim_path().write_text("set nocompatible\n", encoding="utf-8")
            self.assertEqual(resolve_config(ctx), ctx.init_vim_path())

            ctx.init_lua_path().write_text("vim.opt.rtp:append('.')\n", encoding="utf-8")
            self.assertEqual(resolve_config(ctx), ctx.init_lua_path())

    def test_directory_named_like_entry_point_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            ctx = isolate(Path(td))
            ctx.init_lua_path().mkdir(parents=True)
            self.assertIsNone(resolve_config(ctx))


if __name__ == "__main__":
    unittest.main()
