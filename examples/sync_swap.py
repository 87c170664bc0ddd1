import logging
import sys
from oogabooga.execution import execute_swap_sync
from examples.helpers import get_client, get_settings, get_swap_params, setup_logging

logger = logging.getLogger("examples.sync_swap")

def fetch_swap_and_execute() -> None:
    """Fetch a swap transaction synchronously and optionally execute it.

    Raises:
        ValueError: If no route is found
    """
    settings = get_settings()
    client = get_client(settings)

    try:
        swap = client.get_swap_sync(get_swap_params(settings))
    finally:
        client.close()
    if not swap.has_route():
        raise ValueError(f"No route found: {swap.status}")

    if settings.submit_swap:
        execute_swap_sync(swap, settings)

def main() -> None:
    setup_logging()
    try:
        fetch_swap_and_execute()
    except Exception:
        logger.exception("Swap failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
