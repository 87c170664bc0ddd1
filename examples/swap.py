"""Fetch a swap from the Ooga Booga API and, if SUBMIT_SWAP is set, execute it."""

import asyncio
import logging
import sys
from oogabooga import decode_swap_calldata
from oogabooga.execution import execute_swap_async
from examples.helpers import get_client, get_settings, get_swap_params, setup_logging

logger = logging.getLogger("examples.swap")

async def fetch_swap_and_execute() -> None:
    """Fetch a swap transaction, log it, and optionally execute it.

    Raises:
        ValueError: If no route is found
    """
    settings = get_settings()
    client = get_client(settings)

    try:
        swap = await client.get_swap(get_swap_params(settings))
    finally:
        await client.aclose()
    if not swap.has_route():
        raise ValueError(f"No route found: {swap.status}")

    try:
        fn_name, args = decode_swap_calldata(swap.tx.data)
        logger.info("calldata %s %s", fn_name, args)
    except ValueError as e:
        logger.warning("Could not decode calldata: %s", e)

    if not settings.submit_swap:
        logger.info("SUBMIT_SWAP not set, skipping submission")
        return

    await execute_swap_async(swap, settings)

def main() -> None:
    setup_logging()
    try:
        asyncio.run(fetch_swap_and_execute())
    except Exception:
        logger.exception("Swap failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
