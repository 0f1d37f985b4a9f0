"""DNS resolution check entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config.settings import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dns-resolution-check",
        description="Resolve HOSTNAME from this node and report the verdict to Kuberhealthy.",
    )
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="skip waiting for node age and Kuberhealthy readiness",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    bootstrap_logging(
        service="dns-check",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="dns-check.jsonl",
    )
    try:
        # imported after logging is configured so module loggers inherit it
        from presentation.cli import CheckCommand

        return asyncio.run(CheckCommand(gate_enabled=not args.no_wait).run())
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
