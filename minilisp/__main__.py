"""Command line entry point: python -m minilisp [FILE ...]"""

from __future__ import annotations

import argparse
import logging
import sys

from minilisp import config
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter

logger = logging.getLogger("minilisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="Evaluate minilisp programs.")
    parser.add_argument("files", nargs="*", help="source files; standard input when omitted")
    parser.add_argument("--log-level", default=None, help="logging level (env: MINILISP_LOG_LEVEL)")
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="host recursion limit (env: MINILISP_RECURSION_LIMIT)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config.setup_logging(args.log_level)
    config.apply_recursion_limit(args.recursion_limit or config.get_recursion_limit())

    interpreter = Interpreter()
    try:
        if not args.files:
            interpreter.run(sys.stdin.read())
        for path in args.files:
            with open(path, encoding="utf-8") as f:
                interpreter.run(f.read())
    except LispError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except OSError as e:
        logger.error("cannot read source: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
