from __future__ import annotations

import unittest
from pathlib import Path

from nvimshim.config.shim_config import ShimConfig


class ShimConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ShimConfig.from_environ({}, cwd=Path("/work"))
        self.assertEqual(cfg.nvim, "nvim")
        self.assertEqual(cfg.base_dir, Path("/work"))
        self.assertEqual(cfg.xdg_subtree, ".tests/xdg")
        self.assertEqual(cfg.luarocks, "luarocks")
        self.assertEqual(cfg.lua_version, "5.1")
        self.assertFalse(cfg.trace)

    def test_environment_overrides(self) -> None:
        cfg = ShimConfig.from_environ(
            {
                "NVIMSHIM_NVIM": "/opt/nvim/bin/nvim",
                "NVIMSHIM_BASE_DIR": "/repo",
                "NVIMSHIM_XDG_ROOT": "/tmp/xdg",
                "NVIMSHIM_LUAROCKS": "/opt/luarocks",
                "NVIMSHIM_LUA_VERSION": "5.4",
                "NVIMSHIM_TRACE": "Yes",
            },
            cwd=Path("/work"),
        )
        self.assertEqual(cfg.nvim, "/opt/nvim/bin/nvim")
        self.assertEqual(cfg.base_dir, Path("/repo"))
        self.assertEqual(cfg.xdg_subtree, "/tmp/xdg")
        self.assertEqual(cfg.luarocks, "/opt/luarocks")
        self.assertEqual(cfg.lua_version, "5.4")
        self.assertTrue(cfg.trace)

    def test_blank_values_fall_back_to_defaults(self) -> None:
        cfg = ShimConfig.from_environ({"NVIMSHIM_NVIM": "  ", "NVIMSHIM_XDG_ROOT": ""}, cwd=Path("/work"))
        self.assertEqual(cfg.nvim, "nvim")
        self.assertEqual(cfg.xdg_subtree, ".tests/xdg")

    def test_trace_is_off_for_falsy_values(self) -> None:
        for v in ("0", "no", "off", "false"):
            with self.subTest(v=v):
                self.assertFalse(ShimConfig.from_environ({"NVIMSHIM_TRACE": v}, cwd=Path("/w")).trace)

    def test_validate_rejects_empty_executables(self) -> None:
        cfg = ShimConfig(nvim="", base_dir=Path("/w"), xdg_subtree=" ", luarocks="", lua_version="5.1")
        with self.assertRaises(ValueError) as cm:
            cfg.validate()
        msg = str(cm.exception)
        self.assertIn("nvim executable", msg)
        self.assertIn("luarocks executable", msg)
        self.assertIn("xdg_subtree", msg)

    def test_to_json_obj(self) -> None:
        cfg = ShimConfig.default(base_dir=Path("/w"))
        self.assertEqual(
            cfg.to_json_obj(),
            {
                "nvim": "nvim",
                "base_dir": "/w",
                "xdg_subtree": ".tests/xdg",
                "luarocks": "luarocks",
                "lua_version": "5.1",
                "trace": False,
            },
        )


if __name__ == "__main__":
    unittest.main()
