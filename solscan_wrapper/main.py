"""
Command-line runner: call one Solscan endpoint and print the raw response.

Usage:
    python -m solscan_wrapper.main <operation> [key=value ...]

Example:
    python -m solscan_wrapper.main get_account_tokens account=So11111111111111111111111111111111111111112
"""

import asyncio
import re
import sys

from loguru import logger

from solscan_wrapper.client import SolscanClient
from solscan_wrapper.config import LOG_FILE, LOG_LEVEL, LOG_ROTATION, SOLSCAN_API_KEY
from solscan_wrapper.errors import SolscanInputError

_INT_RE = re.compile(r"^-?\d+$")


def parse_args(argv: list[str]) -> tuple[str, dict]:
    """Split argv into an operation name and keyword arguments."""
    if not argv:
        raise ValueError("missing operation")

    operation, *rest = argv
    if operation not in SolscanClient.OPERATIONS:
        raise ValueError(f"unknown operation: {operation}")

    kwargs = {}
    for arg in rest:
        if "=" not in arg:
            raise ValueError(f"expected key=value, got: {arg}")
        key, value = arg.split("=", 1)
        kwargs[key] = int(value) if _INT_RE.match(value) else value
    return operation, kwargs


def usage() -> str:
    lines = ["Usage: python -m solscan_wrapper.main <operation> [key=value ...]", "", "Operations:"]
    lines += [f"  {name}" for name in SolscanClient.OPERATIONS]
    return "\n".join(lines)


async def run_operation(client: SolscanClient, operation: str, kwargs: dict) -> str:
    method = getattr(client, operation)
    return await method(**kwargs)


async def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        operation, kwargs = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}\n")
        print(usage())
        return 1

    if not SOLSCAN_API_KEY:
        print("Error: SOLSCAN_API_KEY is not set (environment or .env)")
        return 1

    logger.add(LOG_FILE, rotation=LOG_ROTATION, level=LOG_LEVEL,
               format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}")

    async with SolscanClient(SOLSCAN_API_KEY) as client:
        try:
            body = await run_operation(client, operation, kwargs)
        except SolscanInputError as e:
            print(f"Error: {e}")
            return 2
        except TypeError as e:
            print(f"Error: bad arguments for {operation}: {e}")
            return 2

    print(body)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
