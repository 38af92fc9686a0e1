"""Command-line entry point: ``shamir-recover FILE [FILE ...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from shamir_recovery.ingest import load_document
from shamir_recovery.rational import DivisionByZero
from shamir_recovery.report import format_summary, run_scheme
from shamir_recovery.verification import DEFAULT_SAMPLE_LIMIT

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-recover",
        description="Reconstruct Shamir secrets from JSON share documents.",
    )
    parser.add_argument("files", nargs="+", help="share documents to process")
    parser.add_argument(
        "--sample-limit",
        type=int,
        default=DEFAULT_SAMPLE_LIMIT,
        help="alternative k-subsets to re-check (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.sample_limit < 0:
        parser.error("--sample-limit must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    all_ok = True
    for path in args.files:
        try:
            scheme = load_document(path)
            summary = run_scheme(scheme, sample_limit=args.sample_limit, name=path)
            text = format_summary(summary)
        except (OSError, ValueError, DivisionByZero) as exc:
            logger.debug("Failed on %s", path, exc_info=True)
            print(f"Error in {path}: {exc}", file=sys.stderr)
            all_ok = False
            continue
        print(text)
        all_ok = all_ok and summary.ok

    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
