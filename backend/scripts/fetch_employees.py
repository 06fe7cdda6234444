#!/usr/bin/env python3
"""Fetch one batch of employees from the random-user API and print it as JSON.

Run from the backend/ directory:

    python3 scripts/fetch_employees.py [--count N] [--seed SEED] [--verbose]

Running twice with the same --seed prints the same employees.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.core.exceptions import UpstreamError  # noqa: E402
from app.core.logging_config import configure_logging  # noqa: E402
from app.services.employee_service import EmployeeService  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch employees from the random-user API and print them as JSON",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of employees to fetch (default: RANDOM_USER_RESULTS_COUNT)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Seed for a reproducible dataset (default: RANDOM_USER_SEED)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.count is not None:
        overrides["RANDOM_USER_RESULTS_COUNT"] = args.count
    if args.seed is not None:
        overrides["RANDOM_USER_SEED"] = args.seed
    if args.verbose:
        overrides["LOG_LEVEL"] = "DEBUG"
    return Settings(**overrides)


async def fetch(args: argparse.Namespace) -> int:
    settings = build_settings(args)
    configure_logging(settings)

    service = EmployeeService()
    await service.initialize(settings)
    try:
        employees = await service.fetch_employees()
    except UpstreamError as e:
        logger.error("Fetch failed: %s", e)
        return 1
    finally:
        await service.close()

    print(json.dumps([e.model_dump(by_alias=True) for e in employees], indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(fetch(args)))


if __name__ == "__main__":
    main()
