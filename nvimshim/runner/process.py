from __future__ import annotations

import subprocess
import sys
from typing import TextIO

from nvimshim.invocation.plan import InvocationPlan


EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def exit_status(returncode: int) -> int:
    # Popen reports death-by-signal N as -N; report it the way a shell would.
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


def trace(plan: InvocationPlan, *, err: TextIO | None = None) -> None:
    out = err if err is not None else sys.stderr
    out.write(f"[nvimshim] {plan.mode}: {plan.command_line()}\n")
    out.flush()


def run_plan(plan: InvocationPlan, *, err: TextIO | None = None) -> int:
    """
    Run the plan's child to completion and return its exit status unchanged.

    stdin/stdout/stderr are inherited, so the child's output reaches the caller
    without buffering or interleaving changes. There is no timeout.
    """
    out = err if err is not None else sys.stderr
    program = plan.args[0]
    try:
        proc = subprocess.Popen(list(plan.args), env=dict(plan.env))
    except FileNotFoundError:
        out.write(f"nvimshim: {program}: command not found\n")
        return EXIT_NOT_FOUND
    except PermissionError:
        out.write(f"nvimshim: {program}: permission denied\n")
        return EXIT_NOT_EXECUTABLE

    while True:
        try:
            rc = proc.wait()
            break
        except KeyboardInterrupt:
            # The child shares our terminal and got the same SIGINT; its status wins.
            continue
    return exit_status(rc)
