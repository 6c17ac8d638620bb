#!/usr/bin/env python3
"""
calc.py

Command-line calculator on top of parsemath.

Usage examples:
    python scripts/calc.py                     # interactive, one expression per line
    python scripts/calc.py "2+3*4" "(2)(3)"    # evaluate and print each result
    python scripts/calc.py --file exprs.txt    # batch-evaluate a file, print a table
    python scripts/calc.py --max-depth 64 --log-level DEBUG "((1))"

Environment: PARSEMATH_MAX_DEPTH, PARSEMATH_LOG_LEVEL (flags win).
"""

import argparse
import logging
import sys

from engine.batch import evaluate_batch
from parsemath.config import Settings
from parsemath.errors import ParseError
from parsemath.eval import evaluate

logger = logging.getLogger("parsemath.cli")

PROMPT = "> "
QUIT = {"quit", "exit"}


def build_parser():
    ap = argparse.ArgumentParser(description="Evaluate arithmetic expressions.")
    ap.add_argument("expressions", nargs="*", help="Expressions to evaluate (none: interactive).")
    ap.add_argument("--file", type=str, default=None, help="Evaluate each non-blank line of a file.")
    ap.add_argument("--max-depth", type=int, default=None, help="Maximum nesting depth.")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, ...).")
    return ap


def repl(settings: Settings) -> int:
    print("Enter an arithmetic expression (quit to exit).")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT:
            return 0
        try:
            print(f"The computed number is {evaluate(line, max_depth=settings.max_depth)}")
        except ParseError as e:
            print(e)


def run_expressions(expressions, settings: Settings) -> int:
    status = 0
    for expr in expressions:
        try:
            print(evaluate(expr, max_depth=settings.max_depth))
        except ParseError as e:
            logger.info("failed on %r", expr)
            print(e)
            status = 1
    return status


def run_file(path: str, settings: Settings) -> int:
    with open(path, "r", encoding="utf-8") as f:
        exprs = [line.strip() for line in f if line.strip()]
    df = evaluate_batch(exprs, max_depth=settings.max_depth)
    print(df.to_string(index=False))
    return 1 if df["error"].notna().any() else 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    settings = Settings(**{**Settings.from_env().model_dump(), **overrides})

    logging.basicConfig(level=settings.log_level)

    if args.file:
        return run_file(args.file, settings)
    if args.expressions:
        return run_expressions(args.expressions, settings)
    return repl(settings)


if __name__ == "__main__":
    sys.exit(main())
