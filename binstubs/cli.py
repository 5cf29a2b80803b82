"""binstubs.cli

Command-line entrypoint and the single place where errors become exit codes.

Exit status:
  0 - stubs generated (or every import was ignored)
  1 - no imports found in the declaration file
  2 - fatal error (bad directive, bad config, unreadable input, unwritable output)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .errors import BinstubsError, NoDeclarationsFound
from .generator import run

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_IMPORTS = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binstubs",
        description="Generate bin/ stubs that `go run` the tools pinned in tools.go.",
    )
    parser.add_argument(
        "--tools-file",
        help="Declaration file to scan (default: tools.go, or $BINSTUBS_TOOLS_FILE)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory to write stubs into (default: bin, or $BINSTUBS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        help="YAML config file (default: .binstubs.yml when present)",
    )
    parser.add_argument("--env-file", help="dotenv file to load (default: .env when present)")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true", help="Only report errors")
    verbosity.add_argument("--verbose", action="store_true", help="Also report skipped imports")
    return parser


def configure_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Send diagnostics to stderr as bare messages."""
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("binstubs")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(quiet=args.quiet, verbose=args.verbose)

    try:
        config = load_config(
            tools_file=args.tools_file,
            output_dir=args.output_dir,
            config_file=args.config_file,
            env_file=args.env_file,
        )
        result = run(config)
    except NoDeclarationsFound as e:
        print(e)
        return EXIT_NO_IMPORTS
    except (BinstubsError, OSError) as e:
        if args.verbose:
            logger.exception("binstubs: error: %s", e)
        else:
            logger.error("binstubs: error: %s", e)
        return EXIT_FATAL

    logger.debug("%d import(s), %d written, %d ignored", result.matched, len(result.written), len(result.skipped))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
