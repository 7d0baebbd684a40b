"""
Command line front end for yall.

With no file arguments, runs a line-oriented read-eval-print loop: each line
is read as one expression, evaluated in a single long-lived global
environment and its value printed. An error aborts only the line it came
from. With file arguments, loads each file in turn into one global
environment; the first error aborts the run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from yall import __version__
from yall.errors import YallEndOfInput, YallError
from yall.evaluation.evaluator import evaluate_string, load
from yall.interpreter import make_global_environment
from yall.types.environment import Environment

logger = logging.getLogger(__name__)

PROMPT = "yall> "


def format_error(e: BaseException) -> str:
    return f"*** ERROR: {e}"


class Repl:
    def __init__(self, env: Environment, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.env = env
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def eval_line(self, line: str) -> str | None:
        """Evaluate one input line; return the text to echo, if any."""
        try:
            result = evaluate_string(self.env, line)
        except YallEndOfInput:
            return None
        except (YallError, RecursionError) as e:
            logger.debug("Evaluation of %r failed", line, exc_info=True)
            return format_error(e)
        return str(result)

    def run(self) -> None:
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            output = self.eval_line(line)
            if output is not None:
                self.stdout.write(output + "\n")
        self.stdout.write("\n")


def load_files(env: Environment, paths: list[str]) -> int:
    for path in paths:
        try:
            stream = open(path, encoding="utf-8")
        except OSError as e:
            print(f"Can't open {path}: error {e.strerror}", file=sys.stderr)
            return 1
        with stream:
            try:
                load(env, stream)
            except (YallError, RecursionError) as e:
                print(format_error(e), file=sys.stderr)
                return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yall", description="Yet another little Lisp")
    parser.add_argument("files", nargs="*", help="source files to load; starts a REPL when omitted")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--prelude", type=Path, default=None, help="bootstrap prelude file to load")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the bootstrap prelude")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        env = make_global_environment(prelude=not args.no_prelude, prelude_path=args.prelude)
    except YallError as e:
        print(format_error(e), file=sys.stderr)
        return 1

    if args.files:
        return load_files(env, args.files)
    Repl(env).run()
    return 0
