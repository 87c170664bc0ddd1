from web3 import Web3

from oogabooga.abi import ROUTER_ABI, decode_swap_calldata, router_contract

from conftest import EXECUTOR, RECEIVER, ROUTER, TOKEN_IN, TOKEN_OUT


def abi_names(kind):
    return {entry["name"] for entry in ROUTER_ABI if entry["type"] == kind}


def test_router_abi_describes_swap_entry_points():
    assert {"swap", "swapERC20Permit", "swapPermit2", "referralLookup"} <= abi_names("function")
    assert abi_names("event") == {"OwnershipTransferred", "Paused", "Swap", "Unpaused"}
    assert {"SameTokenInAndOut", "SlippageExceeded", "MinimumOutputIsZero"} <= abi_names("error")


def test_swap_function_signature():
    swap = next(entry for entry in ROUTER_ABI if entry.get("name") == "swap")

    assert swap["stateMutability"] == "payable"
    assert [arg["name"] for arg in swap["inputs"]] == ["tokenInfo", "pathDefinition", "executor", "referralCode"]
    assert [c["name"] for c in swap["inputs"][0]["components"]] == [
        "inputToken",
        "inputAmount",
        "outputToken",
        "outputQuote",
        "outputMin",
        "outputReceiver",
    ]


def test_router_contract_binds_address():
    contract = router_contract(Web3(), ROUTER)

    assert contract.address == Web3.to_checksum_address(ROUTER)


def test_decode_swap_calldata():
    token_info = (
        Web3.to_checksum_address(TOKEN_IN),
        100_000_000,
        Web3.to_checksum_address(TOKEN_OUT),
        99_500_000,
        98_505_000,
        Web3.to_checksum_address(RECEIVER),
    )
    data = router_contract().encode_abi(
        "swap",
        args=[token_info, b"\x01\x02", Web3.to_checksum_address(EXECUTOR), 7],
    )

    fn_name, args = decode_swap_calldata(data)

    assert fn_name == "swap"
    assert args["executor"] == Web3.to_checksum_address(EXECUTOR)
    assert args["referralCode"] == 7
    assert args["pathDefinition"] == b"\x01\x02"
