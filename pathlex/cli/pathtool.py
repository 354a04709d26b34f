"""Path-string CLI: clean, decompose and join paths without touching the filesystem.

Usage: python -m pathlex.cli.pathtool <command> [--raw] [--delimiter C] [--log-dir DIR] [paths...]

Paths are read one per line from stdin when none are given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from pathlex.describe import describe
from pathlex.filename import FileName
from pathlex.logging import StructuredLogger, create_logger
from pathlex.sanitize import SEPARATOR, PathInputError

logger = logging.getLogger("pathlex.cli")

COMMANDS = ("clean", "name", "path", "ext", "less-ext", "components", "join", "describe")


def _read_paths(args: List[str], stdin: TextIO) -> List[str]:
    if args:
        return list(args)
    return [line.rstrip("\n") for line in stdin if line.strip()]


def _decompose(command: str, delimiter: str) -> Callable[[FileName], str]:
    ops: Dict[str, Callable[[FileName], str]] = {
        "clean": str,
        "name": lambda fn: str(fn.name()),
        "path": lambda fn: str(fn.path()),
        "ext": lambda fn: str(fn.ext()),
        "less-ext": lambda fn: str(fn.less_ext()),
        "components": lambda fn: " ".join(fn.components(delimiter)),
    }
    return ops[command]


def run(
    command: str,
    paths: Iterable[str],
    *,
    raw: bool = False,
    delimiter: str = SEPARATOR,
    trace: Optional[StructuredLogger] = None,
) -> List[str]:
    """Apply ``command`` to each path and return the output lines."""
    if command == "join":
        joined = FileName.from_components(paths)
        if not raw:
            joined.clean()
        if trace:
            trace.info("join", result=str(joined))
        return [str(joined)]

    out: List[str] = []
    for text in paths:
        if command == "describe":
            line = describe(text).model_dump_json()
        else:
            fn = FileName(text)
            if not raw:
                fn.clean()
            line = _decompose(command, delimiter)(fn)
        if trace:
            trace.info(command, input=text, result=line)
        out.append(line)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pathlex", description=__doc__.splitlines()[0])
    ap.add_argument("command", choices=COMMANDS)
    ap.add_argument("paths", nargs="*")
    ap.add_argument("--raw", action="store_true", help="Skip clean() before decomposing")
    ap.add_argument("--delimiter", default=SEPARATOR, help="Delimiter for 'components'")
    ap.add_argument("--log-dir", default=None, help="Write a structured JSONL trace here")
    args = ap.parse_args(argv)

    if len(args.delimiter) != 1:
        ap.error("--delimiter must be a single character")

    trace = create_logger("cli", log_dir=args.log_dir)
    try:
        lines = run(
            args.command,
            _read_paths(args.paths, sys.stdin),
            raw=args.raw,
            delimiter=args.delimiter,
            trace=trace,
        )
    except PathInputError as e:
        logger.error("rejected input: %s", e)
        trace.error("rejected input", error=str(e))
        print(f"[pathlex] {e}", file=sys.stderr)
        return 1
    finally:
        trace.close()

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
