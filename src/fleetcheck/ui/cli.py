# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fleetcheck.app import run_audit
from fleetcheck.config import DEFAULT_WAIT_SECONDS, ConfigurationError, configure_logging
from fleetcheck.domain.errors import AuditAbortedError
from fleetcheck.ui.report import write_report

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check broker and node consistency for public identity and cartridges",
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=DEFAULT_WAIT_SECONDS,
        help="Seconds to wait for each node to answer (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress and print advisory notices",
    )
    args = parser.parse_args(list(argv))
    if args.wait <= 0:
        raise ValueError(f"Wait must be positive, got {args.wait}")
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point; exits with the number of failed checks."""

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(verbose=parsed_args.verbose)

    try:
        report = run_audit(wait_seconds=parsed_args.wait)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except AuditAbortedError as exc:
        print("1 ERRORS", file=sys.stderr)
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during audit")
        sys.exit(1)

    sys.exit(write_report(report, verbose=parsed_args.verbose))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(130)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
