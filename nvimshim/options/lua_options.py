from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence


# Valid for the standalone interpreter, but `nvim -l` has no equivalent.
REJECTED_FLAGS = ("-i", "-l", "-E")


class OptionError(ValueError):
    pass


class UnsupportedOptionError(OptionError):
    def __init__(self, flag: str) -> None:
        super().__init__(f"Option '{flag}' not supported by shim")
        self.flag = flag


@dataclass(frozen=True)
class OptionSet:
    inline_expr: str | None
    version: bool
    rejected: tuple[str, ...]
    script_args: tuple[str, ...]

    def ensure_supported(self) -> None:
        if self.rejected:
            raise UnsupportedOptionError(self.rejected[0])


class _LuaArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise OptionError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _LuaArgumentParser(prog="lua", add_help=False, allow_abbrev=False)
    p.add_argument("-e", dest="inline_expr", default=None, metavar="stat")
    p.add_argument("-v", dest="version", action="store_true")
    for flag in REJECTED_FLAGS:
        p.add_argument(flag, dest="rejected", action="append_const", const=flag)
    # Everything from the first non-flag token on belongs to the script.
    p.add_argument("script_args", nargs=argparse.REMAINDER)
    p.set_defaults(rejected=None)
    return p


def _attach_inline_values(argv: Sequence[str]) -> list[str]:
    # argparse refuses `-e -x`; getopt hands `-x` to -e. The attached form
    # (`-e-x`, `-ve-x`) parses the same in both.
    out: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--" or tok == "-" or not tok.startswith("-"):
            out.extend(argv[i:])
            break
        body = tok[1:]
        nxt = argv[i + 1] if i + 1 < len(argv) else None
        if body.find("e") == len(body) - 1 and nxt is not None:
            out.extend([tok + nxt] if nxt.startswith("-") else [tok, nxt])
            i += 2
            continue
        out.append(tok)
        i += 1
    return out


def parse_lua_options(argv: Sequence[str]) -> OptionSet:
    """
    Parse a standalone-`lua` style command line.

    Short flags may be clustered (`-vi`) and `-e` accepts an attached or a
    separate argument. Rejected flags are collected in order of appearance
    rather than raised here; callers must run `OptionSet.ensure_supported()`
    before acting on the result.
    """
    ns = _build_parser().parse_args(_attach_inline_values(argv))
    script_args = list(ns.script_args or [])
    # REMAINDER keeps the `--` terminator; lua itself drops it.
    if script_args and script_args[0] == "--":
        script_args = script_args[1:]
    return OptionSet(
        inline_expr=ns.inline_expr,
        version=bool(ns.version),
        rejected=tuple(ns.rejected or ()),
        script_args=tuple(script_args),
    )
