from __future__ import annotations

import contextlib
import io
import tempfile
from pathlib import Path
from typing import Any

from nvimshim.lua.__main__ import main as lua_main
from nvimshim.scenarios.fake_nvim import fake_environ, read_invocations, write_fake_nvim


def run_scenarios() -> dict:
    """
    End-to-end self-check of the lua adapter against a fake nvim.

    Covers version query, inline expression, interpreter mode with and
    without an isolated init file, a rejected flag, and exit propagation.
    """
    errors: list[str] = []
    results: list[dict[str, Any]] = []
    with tempfile.TemporaryDirectory() as td:
        root = Path(td).resolve()
        nvim = write_fake_nvim(root / "bin")
        record = root / "invocations.jsonl"

        def run(argv: list[str], **extra: str) -> tuple[int, list[dict[str, Any]], str]:
            if record.exists():
                record.unlink()
            env = fake_environ(nvim, record, FAKE_NVIM_QUIET="1", **extra)
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                rc = lua_main(argv, environ=env, cwd=root)
            return rc, read_invocations(record), err.getvalue()

        def expect(name: str, cond: bool, detail: Any) -> None:
            results.append({"name": name, "ok": bool(cond)})
            if not cond:
                errors.append(f"{name}: {detail}")

        # Scenario 1: version query.
        rc, calls, _ = run(["-v"])
        expect("version", rc == 0 and [c["argv"] for c in calls] == [["--version"]], (rc, calls))

        # Scenario 2: inline expression, always followed by qa!.
        rc, calls, _ = run(["-e", "return 1+1"])
        expect(
            "inline",
            rc == 0 and [c["argv"] for c in calls] == [["--headless", "-c", "lua return 1+1", "-c", "qa!"]],
            (rc, calls),
        )

        # Scenario 3: interpreter mode without config.
        rc, calls, _ = run(["spec.lua", "b", "-a", "b"])
        expect(
            "interpreter",
            rc == 0 and [c["argv"] for c in calls] == [["--cmd", "set loadplugins", "-l", "spec.lua", "b", "-a", "b"]],
            (rc, calls),
        )
        if calls:
            xdg_config = calls[0]["env"].get("XDG_CONFIG_HOME")
            expect("isolation", xdg_config == str(root / ".tests" / "xdg" / "config"), xdg_config)

        # Scenario 4: init.lua wins over init.vim.
        nvim_dir = root / ".tests" / "xdg" / "config" / "nvim"
        nvim_dir.mkdir(parents=True, exist_ok=True)
        (nvim_dir / "init.lua").write_text("-- init\n", encoding="utf-8")
        (nvim_dir / "init.vim").write_text('" init\n', encoding="utf-8")
        rc, calls, _ = run(["spec.lua"])
        expect(
            "config_priority",
            [c["argv"] for c in calls] == [["--cmd", "set loadplugins", "-u", str(nvim_dir / "init.lua"), "-l", "spec.lua"]],
            calls,
        )

        # Scenario 5: rejected flag spawns nothing.
        rc, calls, err = run(["-i"])
        expect("rejected", rc == 1 and not calls and "Option '-i' not supported by shim" in err, (rc, calls, err))

        # Scenario 6: exit status propagation.
        for code in (0, 1, 2, 127):
            rc, _, _ = run(["spec.lua"], FAKE_NVIM_EXIT=str(code))
            expect(f"exit_{code}", rc == code, rc)

    return {"ok": not errors, "errors": errors, "scenarios": results}
