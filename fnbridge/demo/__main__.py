"""
fnbridge.demo.__main__ - CLI entry point for the demo application

Usage:
    python -m fnbridge.demo --log-level DEBUG
"""

import argparse
import asyncio
import logging
import sys

from fnbridge.demo.main import run
from fnbridge.settings import get_settings


def main() -> None:
    """Parse arguments and run the demo."""
    parser = argparse.ArgumentParser(
        prog="fnbridge-demo",
        description="Adapt a callback-based sample API and print its data",
    )
    parser.add_argument(
        "--log-level",
        default=get_settings().log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: FNBRIDGE_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        sys.exit(asyncio.run(run()))
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
