"""Command-line entry point: run a .yoc file, evaluate a string, or start a REPL."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from yocto import __version__
from yocto.config import SOURCE_SUFFIX, get_log_level, get_prompt
from yocto.errors import YoctoError
from yocto.interpreter import Interpreter
from yocto.printer import to_lisp_string

EXIT_COMMAND = "exit"


def repl(interp: Interpreter, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """Read-eval-print loop: errors are reported and the loop carries on."""
    prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if line == EXIT_COMMAND:
            break
        if not line:
            continue
        try:
            result = interp.eval(line)
        except (YoctoError, RecursionError) as ex:
            stdout.write(f"Error: {ex}\n")
            continue
        stdout.write(to_lisp_string(result) + "\n")


def run_file(interp: Interpreter, filename: str) -> int:
    path = Path(filename)
    if path.suffix != SOURCE_SUFFIX:
        print(f"Error: File must have {SOURCE_SUFFIX} extension", file=sys.stderr)
        return 1
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as ex:
        print(f"Error reading file: {ex}", file=sys.stderr)
        return 1
    try:
        interp.eval(source)
    except (YoctoError, RecursionError) as ex:
        print(f"Error evaluating file: {ex}", file=sys.stderr)
        return 1
    return 0


def run_code(interp: Interpreter, code: str) -> int:
    try:
        result = interp.eval(code)
    except (YoctoError, RecursionError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    print(to_lisp_string(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yocto",
        description="Yocto Lisp interpreter. Starts a REPL when no file is given.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help=f"Path to a Yocto source file ({SOURCE_SUFFIX}).",
    )
    parser.add_argument(
        "-e", "--eval",
        metavar="CODE",
        help="Evaluate CODE and print the result of its last expression.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log macro expansions and definitions (DEBUG level).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    interp = Interpreter()
    if args.eval is not None:
        return run_code(interp, args.eval)
    if args.file:
        return run_file(interp, args.file)
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
