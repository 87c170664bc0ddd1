import logging
from oogabooga import Settings, SwapClient, SwapParams

# Common constants
TOKEN_IN = "0x0555E30da8f98308EdB960aa94C0Db47230d2B9c"  # WBTC
TOKEN_OUT = "0x657e8C867D8B37dCC18fA4Caead9C45EB088C642"  # eBTC
RECEIVER = "0xed63E871F5de87cb1919671eE9e2d331183Eda8f"  # the opener contract
AMOUNT = 100_000_000  # 1 WBTC

def setup_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def get_settings() -> Settings:
    """Get settings from environment variables and the local .env file."""
    return Settings.from_env()

def get_client(settings: Settings) -> SwapClient:
    """Get a SwapClient instance for the configured API URL.

    Raises:
        ValueError: If OOGABOGA_API_KEY is not set
    """
    if not settings.api_key:
        raise ValueError("OOGABOGA_API_KEY must be set")

    return SwapClient(settings.api_key, settings.api_url)

def get_swap_params(settings: Settings) -> SwapParams:
    return SwapParams(
        token_in=TOKEN_IN,
        amount=AMOUNT,
        token_out=TOKEN_OUT,
        to=RECEIVER,
        slippage=settings.slippage,
    )
