#!/usr/bin/env python3
"""
Demonstrate hierarchical timing on a simulated document pipeline.

Usage:
    python scripts/demo_timer.py              # Print the formatted snapshot
    python scripts/demo_timer.py --json       # Print the snapshot as JSON
    LOG_LEVEL=DEBUG python scripts/demo_timer.py
"""

import argparse
import logging
import os
import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables (PERF_TIMER_*, LOG_LEVEL)
load_dotenv()

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from perf_timer import PerformanceTimer, child_context, format_snapshot, timed, timer_context


@timed("parse")
def parse_page(delay: float) -> None:
    time.sleep(delay)


def run_pipeline(pages: int, delay: float) -> PerformanceTimer:
    """Simulate loading, parsing and indexing a document."""
    with timer_context() as timer:
        time.sleep(delay)
        timer.measure("load")

        for _ in range(pages):
            with child_context("page"):
                parse_page(delay)

        timer.mark("index")
        time.sleep(delay * 2)
        timer.measure("index")

        timer.finalize()
    return timer


def main() -> None:
    parser = argparse.ArgumentParser(description="Performance timer demo")
    parser.add_argument("--pages", type=int, default=3, help="Number of simulated pages")
    parser.add_argument("--delay", type=float, default=0.01, help="Simulated work in seconds")
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    args = parser.parse_args()

    logger.info(f"Running demo pipeline with {args.pages} page(s)")
    timer = run_pipeline(args.pages, args.delay)

    if args.json:
        print(timer.to_json(indent=2))
    else:
        print(format_snapshot(timer.to_snapshot()))


if __name__ == "__main__":
    main()
