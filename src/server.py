"""Protean Engine runner for the storefront domain.

In production events are processed asynchronously: the Engine picks up
OrderPlaced from the broker and runs the stock handler.

Usage:
    PROTEAN_ENV=production python src/server.py
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


async def run(test_mode: bool = False):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Thee Girlies Hub Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()
