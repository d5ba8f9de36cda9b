"""Command line entry point: ``ember [FILE ...] [-i]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ember.config import get_log_level
from ember.default_environment import default_env
from ember.errors import EmberError
from ember.modules.prelude_loader import load_file
from ember.printer import to_lisp_string
from ember.reader.bridge import ParseErrorPolicy
from ember.session import Session


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ember", description="Ember Lisp interpreter")
    ap.add_argument("files", nargs="*", type=Path, help="source files to load before (or instead of) the REPL")
    ap.add_argument("-i", "--interactive", action="store_true",
                    help="start the REPL after loading files")
    ap.add_argument("--parse-errors", choices=[p.value for p in ParseErrorPolicy], default=None,
                    help="what to do with unreadable input on a REPL line (default: $EMBER_PARSE_ERRORS or drop)")
    ap.add_argument("--prompt", default=None, help="prompt string (default: $EMBER_PROMPT or '> ')")
    ap.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    ap.add_argument("--log-level", default=None, help="logging level (default: $EMBER_LOG_LEVEL or WARNING)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    level = args.log_level.upper() if args.log_level else get_log_level()
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    env = default_env(prelude=not args.no_prelude)

    if args.files:
        result = None
        for path in args.files:
            try:
                result = load_file(env, path)
            except FileNotFoundError:
                print(f"Error: file not found: {path}", file=sys.stderr)
                return 1
            except EmberError as e:
                print(f"Error: {path}: {e}", file=sys.stderr)
                return 1
        if not args.interactive:
            print(to_lisp_string(result))
            return 0

    policy = ParseErrorPolicy(args.parse_errors) if args.parse_errors else None
    Session(env, parse_errors=policy, prompt=args.prompt).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
