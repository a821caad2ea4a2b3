"""
Command line front end for PostLisp.

Usage:
    postlisp                  interactive REPL
    postlisp -e PROGRAM       evaluate one program and print its value
    postlisp FILE             evaluate a program file and print its value

Every failure prints a single line `Error: <message>` on stderr. In the REPL a
semantic error also resets the session to the baseline environment.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from postlisp.config import get_canvas_size, get_prompt
from postlisp.errors import PostLispError, PostLispSemanticError
from postlisp.interpreter import Interpreter
from postlisp.printer import to_string
from postlisp.reader.accumulator import InputAccumulator
from postlisp.render import scene_to_svg, to_scene

PARSE_ERROR = "parse error"

logger = logging.getLogger("postlisp")


class InvalidArguments(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArguments(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="postlisp", description="PostLisp drawing interpreter")
    parser.add_argument("file", nargs="?", help="program file to evaluate")
    parser.add_argument("-e", dest="program", metavar="PROGRAM", help="evaluate PROGRAM")
    parser.add_argument("--svg", metavar="OUT", help="write drawn graphics to an SVG file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def error(message: str, err: TextIO) -> None:
    # All error messages funnel through here for consistent formatting.
    print(f"Error: {message}", file=err)


def write_svg(interp: Interpreter, path: str) -> None:
    width, height = get_canvas_size()
    Path(path).write_text(scene_to_svg(to_scene(interp.graphics), width, height), encoding="utf-8")


def run_once(source: str | TextIO, svg: Optional[str], out: TextIO, err: TextIO) -> int:
    interp = Interpreter()
    try:
        if not interp.parse(source):
            error(PARSE_ERROR, err)
            return 1
        result = interp.eval()
    except PostLispError as e:
        error(str(e), err)
        return 1
    except RecursionError:
        error("maximum recursion depth exceeded", err)
        return 1
    if svg:
        try:
            write_svg(interp, svg)
        except OSError:
            error("could not write file", err)
            return 1
    print(to_string(result), file=out)
    return 0


def run_file(filename: str, svg: Optional[str], out: TextIO, err: TextIO) -> int:
    try:
        infile = open(filename, encoding="utf-8")
    except OSError:
        error("could not open file", err)
        return 1
    with infile:
        return run_once(infile, svg, out, err)


def eval_entry(interp: Interpreter, entry: str, out: TextIO, err: TextIO) -> None:
    """Evaluate one complete REPL entry, resetting the session after a semantic error."""
    try:
        if not interp.parse(entry):
            error(PARSE_ERROR, err)
            return
        result = interp.eval()
    except PostLispSemanticError as e:
        error(str(e), err)
        interp.reset()
        return
    except RecursionError:
        error("maximum recursion depth exceeded", err)
        interp.reset()
        return
    print(to_string(result), file=out)


def run_repl(inp: TextIO, out: TextIO, err: TextIO) -> int:
    interp = Interpreter()
    pending = InputAccumulator()
    prompt = get_prompt()

    out.write(prompt)
    out.flush()
    for line in inp:
        entry = pending.feed(line)
        if entry is not None:
            eval_entry(interp, entry, out, err)
        if not pending.pending:
            out.write(prompt)
            out.flush()

    leftover = pending.flush()
    if leftover is not None:
        eval_entry(interp, leftover, out, err)
    return 0


def main(argv: Optional[list[str]] = None,
         inp: Optional[TextIO] = None,
         out: Optional[TextIO] = None,
         err: Optional[TextIO] = None) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        args = build_parser().parse_args(argv)
    except InvalidArguments:
        error("invalid arguments", err)
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=err)

    if args.program is not None:
        if args.file is not None:
            error("invalid arguments", err)
            return 1
        return run_once(args.program, args.svg, out, err)

    if args.file is not None:
        return run_file(args.file, args.svg, out, err)

    if args.svg:
        error("invalid arguments", err)
        return 1
    return run_repl(inp, out, err)


if __name__ == "__main__":
    sys.exit(main())
