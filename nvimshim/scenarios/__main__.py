from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from nvimshim.scenarios.runner import run_scenarios


def _format_report(res: dict[str, Any]) -> list[str]:
    scenarios = res.get("scenarios", [])
    lines = [("PASS " if s.get("ok") else "FAIL ") + str(s.get("name")) for s in scenarios]
    for e in res.get("errors", []):
        lines.append("  " + str(e))
    passed = sum(1 for s in scenarios if s.get("ok"))
    lines.append(f"{passed}/{len(scenarios)} lua adapter scenarios passed")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nvimshim.scenarios",
        description="Self-check the lua adapter against a throwaway fake nvim.",
    )
    parser.add_argument("--json", action="store_true", help="Emit the scenario report as JSON")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    res = run_scenarios()
    if args.json:
        print(json.dumps(res, ensure_ascii=False, indent=2))
    else:
        print("\n".join(_format_report(res)))
    return 0 if res.get("ok") else 2


if __name__ == "__main__":
    raise SystemExit(main())
