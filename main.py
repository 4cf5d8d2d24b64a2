"""Run the bookstore query sequence against the configured MongoDB database."""

import asyncio

from bookstore.runner import run_queries


async def main() -> None:
    try:
        await run_queries()
    except Exception as e:
        print(f"Unhandled error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
