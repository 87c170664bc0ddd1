from .client import SwapClient, SwapClientError, MAINNET_BASE_URL
from .config import Settings
from .http import SwapApiHttpClient
from .types import SwapParams, SwapResponse, SwapTx, RouterParams, SwapTokenInfo
from .abi import ROUTER_ABI, decode_swap_calldata, router_contract

__all__ = [
    "SwapClient",
    "SwapClientError",
    "MAINNET_BASE_URL",
    "Settings",
    "SwapApiHttpClient",
    "SwapParams",
    "SwapResponse",
    "SwapTx",
    "RouterParams",
    "SwapTokenInfo",
    "ROUTER_ABI",
    "decode_swap_calldata",
    "router_contract",
]
