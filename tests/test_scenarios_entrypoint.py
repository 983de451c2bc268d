from __future__ import annotations

import contextlib
import io
import json
import unittest
from unittest import mock

from nvimshim.scenarios.__main__ import main
from nvimshim.scenarios.runner import run_scenarios


_EXPECTED_NAMES = [
    "version",
    "inline",
    "interpreter",
    "isolation",
    "config_priority",
    "rejected",
    "exit_0",
    "exit_1",
    "exit_2",
    "exit_127",
]


class ScenarioRunnerTests(unittest.TestCase):
    def test_all_scenarios_pass_and_are_named(self) -> None:
        res = run_scenarios()
        self.assertTrue(res.get("ok"), res)
        self.assertEqual([s["name"] for s in res["scenarios"]], _EXPECTED_NAMES)
        self.assertTrue(all(s["ok"] for s in res["scenarios"]))


class ScenariosCliTests(unittest.TestCase):
    def test_json_report(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rc = main(["--json"])
        self.assertEqual(rc, 0)
        obj = json.loads(out.getvalue())
        self.assertTrue(obj["ok"])
        self.assertEqual(obj["errors"], [])
        self.assertEqual([s["name"] for s in obj["scenarios"]], _EXPECTED_NAMES)

    def test_text_report_lists_each_scenario(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rc = main([])
        self.assertEqual(rc, 0)
        lines = out.getvalue().splitlines()
        self.assertIn("PASS version", lines)
        self.assertIn("PASS exit_127", lines)
        self.assertEqual(lines[-1], f"{len(_EXPECTED_NAMES)}/{len(_EXPECTED_NAMES)} lua adapter scenarios passed")

    def test_failed_scenario_reports_and_exits_two(self) -> None:
        failing = {
            "ok": False,
            "errors": ["inline: (1, [])"],
            "scenarios": [{"name": "version", "ok": True}, {"name": "inline", "ok": False}],
        }
        out = io.StringIO()
        with mock.patch("nvimshim.scenarios.__main__.run_scenarios", return_value=failing), contextlib.redirect_stdout(out):
            rc = main([])
        self.assertEqual(rc, 2)
        self.assertEqual(
            out.getvalue().splitlines(),
            ["PASS version", "FAIL inline", "  inline: (1, [])", "1/2 lua adapter scenarios passed"],
        )


if __name__ == "__main__":
    unittest.main()
