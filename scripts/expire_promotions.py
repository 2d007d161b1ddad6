#!/usr/bin/env python3
"""
Run the promotion expiry sweep once, outside the API process.

Usage:
    ENV=staging python scripts/expire_promotions.py

    # Keep running on the scheduler interval
    ENV=staging python scripts/expire_promotions.py --daemon --interval 50
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment before importing app modules
from dotenv import load_dotenv

env = os.getenv("ENV", "local")
load_dotenv(f".env.{env}")

print(f"Environment: {env}")


async def run_once() -> int:
    from app.db import AsyncSessionLocal
    from app.services.scheduler import expire_promotions

    cleared = await expire_promotions(AsyncSessionLocal)
    print(f"Cleared {cleared} expired promotion(s)")
    return cleared


async def run_daemon(interval: int):
    print(f"Running every {interval}s, Ctrl+C to stop")
    while True:
        await run_once()
        await asyncio.sleep(interval)


def main():
    parser = argparse.ArgumentParser(description="Clear expired restaurant promotions")
    parser.add_argument("--daemon", action="store_true", help="Run periodically")
    parser.add_argument("--interval", type=int, default=50, help="Seconds between runs")
    args = parser.parse_args()

    try:
        if args.daemon:
            asyncio.run(run_daemon(args.interval))
        else:
            asyncio.run(run_once())
    except KeyboardInterrupt:
        print("\nStopped")


if __name__ == "__main__":
    main()
