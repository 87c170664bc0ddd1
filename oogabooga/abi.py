from typing import Any, Dict, Optional, Tuple
from eth_typing import HexStr
from web3 import Web3
from web3.contract import Contract

_ADDRESS = {"type": "address", "internalType": "address"}
_UINT256 = {"type": "uint256", "internalType": "uint256"}

_SWAP_TOKEN_INFO = {
    "name": "tokenInfo",
    "type": "tuple",
    "internalType": "struct IOBRouter.swapTokenInfo",
    "components": [
        {"name": "inputToken", **_ADDRESS},
        {"name": "inputAmount", **_UINT256},
        {"name": "outputToken", **_ADDRESS},
        {"name": "outputQuote", **_UINT256},
        {"name": "outputMin", **_UINT256},
        {"name": "outputReceiver", **_ADDRESS},
    ],
}

_SWAP_ROUTE_INPUTS = [
    _SWAP_TOKEN_INFO,
    {"name": "pathDefinition", "type": "bytes", "internalType": "bytes"},
    {"name": "executor", **_ADDRESS},
    {"name": "referralCode", "type": "uint32", "internalType": "uint32"},
]

_AMOUNT_OUT = [{"name": "amountOut", **_UINT256}]


def _error(name: str, *inputs: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "error", "name": name, "inputs": list(inputs)}


def _event(name: str, *inputs: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "event", "name": name, "inputs": list(inputs), "anonymous": False}


ROUTER_ABI = [
    {
        "type": "constructor",
        "inputs": [{"name": "_owner", **_ADDRESS}],
        "stateMutability": "nonpayable",
    },
    {"type": "receive", "stateMutability": "payable"},
    {
        "type": "function",
        "name": "FEE_DENOM",
        "inputs": [],
        "outputs": [{"name": "", **_UINT256}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "REFERRAL_WITH_FEE_THRESHOLD",
        "inputs": [],
        "outputs": [{"name": "", **_UINT256}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "owner",
        "inputs": [],
        "outputs": [{"name": "", **_ADDRESS}],
        "stateMutability": "view",
    },
    {"type": "function", "name": "pause", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "paused",
        "inputs": [],
        "outputs": [{"name": "", "type": "bool", "internalType": "bool"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "referralLookup",
        "inputs": [{"name": "", "type": "uint32", "internalType": "uint32"}],
        "outputs": [
            {"name": "referralFee", "type": "uint64", "internalType": "uint64"},
            {"name": "beneficiary", **_ADDRESS},
            {"name": "registered", "type": "bool", "internalType": "bool"},
        ],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "registerReferralCode",
        "inputs": [
            {"name": "_referralCode", "type": "uint32", "internalType": "uint32"},
            {"name": "_referralFee", "type": "uint64", "internalType": "uint64"},
            {"name": "_beneficiary", **_ADDRESS},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {"type": "function", "name": "renounceOwnership", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "swap",
        "inputs": _SWAP_ROUTE_INPUTS,
        "outputs": _AMOUNT_OUT,
        "stateMutability": "payable",
    },
    {
        "type": "function",
        "name": "swapERC20Permit",
        "inputs": [
            {
                "name": "permit",
                "type": "tuple",
                "internalType": "struct IOBRouter.erc20PermitInfo",
                "components": [
                    {"name": "value", **_UINT256},
                    {"name": "deadline", **_UINT256},
                    {"name": "v", "type": "uint8", "internalType": "uint8"},
                    {"name": "r", "type": "bytes32", "internalType": "bytes32"},
                    {"name": "s", "type": "bytes32", "internalType": "bytes32"},
                ],
            },
            *_SWAP_ROUTE_INPUTS,
        ],
        "outputs": _AMOUNT_OUT,
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "swapPermit2",
        "inputs": [
            {
                "name": "permit2",
                "type": "tuple",
                "internalType": "struct IOBRouter.permit2Info",
                "components": [
                    {"name": "contractAddress", **_ADDRESS},
                    {"name": "nonce", **_UINT256},
                    {"name": "deadline", **_UINT256},
                    {"name": "signature", "type": "bytes", "internalType": "bytes"},
                ],
            },
            *_SWAP_ROUTE_INPUTS,
        ],
        "outputs": _AMOUNT_OUT,
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "transferOwnership",
        "inputs": [{"name": "newOwner", **_ADDRESS}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "transferRouterFunds",
        "inputs": [
            {"name": "tokens", "type": "address[]", "internalType": "address[]"},
            {"name": "amounts", "type": "uint256[]", "internalType": "uint256[]"},
            {"name": "dest", **_ADDRESS},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {"type": "function", "name": "unpaused", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    _event(
        "OwnershipTransferred",
        {"name": "previousOwner", "indexed": True, **_ADDRESS},
        {"name": "newOwner", "indexed": True, **_ADDRESS},
    ),
    _event("Paused", {"name": "account", "indexed": False, **_ADDRESS}),
    _event(
        "Swap",
        {"name": "sender", "indexed": False, **_ADDRESS},
        {"name": "inputAmount", "indexed": False, **_UINT256},
        {"name": "inputToken", "indexed": False, **_ADDRESS},
        {"name": "amountOut", "indexed": False, **_UINT256},
        {"name": "outputToken", "indexed": False, **_ADDRESS},
        {"name": "slippage", "type": "int256", "indexed": False, "internalType": "int256"},
        {"name": "referralCode", "type": "uint32", "indexed": False, "internalType": "uint32"},
    ),
    _event("Unpaused", {"name": "account", "indexed": False, **_ADDRESS}),
    _error("AddressEmptyCode", {"name": "target", **_ADDRESS}),
    _error("AddressInsufficientBalance", {"name": "account", **_ADDRESS}),
    _error("EnforcedPause"),
    _error("ExpectedPause"),
    _error("FailedInnerCall"),
    _error("FeeTooHigh", {"name": "fee", "type": "uint64", "internalType": "uint64"}),
    _error("InvalidFeeForCode", {"name": "fee", "type": "uint64", "internalType": "uint64"}),
    _error("InvalidNativeTransfer"),
    _error("InvalidRouterFundsTransfer"),
    _error(
        "MinimumOutputGreaterThanQuote",
        {"name": "outputMin", **_UINT256},
        {"name": "outputQuote", **_UINT256},
    ),
    _error("MinimumOutputIsZero"),
    _error(
        "NativeDepositValueMismatch",
        {"name": "expected", **_UINT256},
        {"name": "received", **_UINT256},
    ),
    _error("NullBeneficiary"),
    _error("OwnableInvalidOwner", {"name": "owner", **_ADDRESS}),
    _error("OwnableUnauthorizedAccount", {"name": "account", **_ADDRESS}),
    _error("ReferralCodeInUse", {"name": "referralCode", "type": "uint32", "internalType": "uint32"}),
    _error("SafeERC20FailedOperation", {"name": "token", **_ADDRESS}),
    _error("SameTokenInAndOut", {"name": "token", **_ADDRESS}),
    _error(
        "SlippageExceeded",
        {"name": "amountOut", **_UINT256},
        {"name": "outputMin", **_UINT256},
    ),
]


def router_contract(w3: Optional[Web3] = None, address: Optional[str] = None) -> Contract:
    """Build a web3 contract object for the router.

    Args:
        w3: The Web3 instance to bind to; an unconnected one is used if omitted
        address: The router address, if calls are to be made against it

    Returns:
        The router contract
    """
    w3 = w3 or Web3()
    if address is None:
        return w3.eth.contract(abi=ROUTER_ABI)
    return w3.eth.contract(address=Web3.to_checksum_address(address), abi=ROUTER_ABI)


def decode_swap_calldata(data: str) -> Tuple[str, Dict[str, Any]]:
    """Decode router calldata, e.g. the ``data`` field of a swap transaction.

    Returns:
        The router function name and its named arguments
    """
    func, args = router_contract().decode_function_input(HexStr(data))
    return func.fn_name, dict(args)
