from __future__ import annotations

import json
import os
import stat
import sys
from pathlib import Path
from typing import Any


_SCRIPT = r"""#!@PYTHON@
import json, os, sys

XDG_KEYS = ("XDG_CONFIG_HOME", "XDG_STATE_HOME", "XDG_DATA_HOME")


def main():
    args = sys.argv[1:]
    record = os.environ.get("FAKE_NVIM_RECORD")
    if record:
        with open(record, "a", encoding="utf-8") as f:
            f.write(json.dumps({"argv": args, "env": {k: os.environ.get(k) for k in XDG_KEYS}}) + "\n")
    quiet = bool(os.environ.get("FAKE_NVIM_QUIET"))
    if args[:1] == ["--version"]:
        if not quiet:
            sys.stdout.write("NVIM v0.0.0-fake\n")
        return 0
    return int(os.environ.get("FAKE_NVIM_EXIT", "0"))


if __name__ == "__main__":
    raise SystemExit(main())
"""


def write_fake_nvim(bin_dir: Path, name: str = "nvim") -> Path:
    """
    Create a fake `nvim` executable for tests and self-check scenarios.

    Behavior is controlled by env vars:
    - FAKE_NVIM_RECORD = path of a JSONL file; one {"argv", "env"} line per call
    - FAKE_NVIM_EXIT = exit status for non-version invocations (default 0)
    - FAKE_NVIM_QUIET = suppress the `--version` banner
    """
    bin_dir.mkdir(parents=True, exist_ok=True)
    path = bin_dir / name
    path.write_text(_SCRIPT.replace("@PYTHON@", sys.executable), encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def read_invocations(record: Path) -> list[dict[str, Any]]:
    if not record.exists():
        return []
    out: list[dict[str, Any]] = []
    for line in record.read_text(encoding="utf-8").splitlines():
        if line.strip():
            out.append(json.loads(line))
    return out


def fake_environ(nvim: Path, record: Path, **extra: str) -> dict[str, str]:
    env = {
        "PATH": os.environ.get("PATH", ""),
        "NVIMSHIM_NVIM": str(nvim),
        "FAKE_NVIM_RECORD": str(record),
    }
    env.update(extra)
    return env
