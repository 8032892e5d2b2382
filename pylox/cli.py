#!/usr/bin/env python3
"""
Command line runner for the Lox scanner.

Usage:
    pylox script.lox        # Print the tokens of a file
    pylox                   # Interactive prompt, one line at a time
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import ErrorReporter, Scanner

# sysexits.h codes, same as the reference Lox runner
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def run(source: str, reporter: ErrorReporter, filename: str = "<stdin>",
        out: Optional[TextIO] = None):
    """Scan `source` and print one token per line."""
    out = out if out is not None else sys.stdout
    tokens = Scanner(source, filename, reporter).scan_tokens()
    for token in tokens:
        print(token, file=out)
    return tokens


def run_file(path: str, reporter: ErrorReporter, out: Optional[TextIO] = None) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return EX_NOINPUT

    run(source, reporter, path, out)
    return EX_DATAERR if reporter.had_error else 0


def run_prompt(reporter: ErrorReporter, stdin: Optional[TextIO] = None,
               out: Optional[TextIO] = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        print("> ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            return 0
        run(line, reporter, "<stdin>", out)
        reporter.reset()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pylox",
        description="Scan Lox source code and print its tokens",
    )
    parser.add_argument('script', nargs='*', help='Lox source file to scan')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    if len(args.script) > 1:
        print("Usage: pylox [script]", file=sys.stderr)
        return EX_USAGE

    reporter = ErrorReporter()
    if args.script:
        return run_file(args.script[0], reporter)
    return run_prompt(reporter)


if __name__ == "__main__":
    sys.exit(main())
