import asyncio

import pytest
from eth_account import Account
from web3 import AsyncWeb3, Web3
from web3.datastructures import AttributeDict

from oogabooga import execution
from oogabooga.config import Settings
from oogabooga.types import SwapResponse

from conftest import ROUTER

PRIVATE_KEY = "0x" + "11" * 32
TX_HASH = b"\xab" * 32


class FakeEth:
    def __init__(self):
        self.sent = []
        self.max_priority_fee = 2
        self.chain_id = 1
        self.receipt_requests = []

    def get_transaction_count(self, address):
        return 5

    def get_block(self, block_identifier):
        return AttributeDict({"baseFeePerGas": 100})

    def estimate_gas(self, params):
        return 100_000

    def send_transaction(self, params):
        self.sent.append(dict(params))
        return TX_HASH

    def wait_for_transaction_receipt(self, tx_hash, timeout):
        self.receipt_requests.append((tx_hash, timeout))
        return AttributeDict({"status": 1, "transactionHash": tx_hash})


class FakeAsyncEth:
    def __init__(self):
        self.sync = FakeEth()

    async def _value(self, value):
        return value

    @property
    def max_priority_fee(self):
        return self._value(self.sync.max_priority_fee)

    @property
    def chain_id(self):
        return self._value(self.sync.chain_id)

    async def get_transaction_count(self, address):
        return self.sync.get_transaction_count(address)

    async def get_block(self, block_identifier):
        return self.sync.get_block(block_identifier)

    async def estimate_gas(self, params):
        return self.sync.estimate_gas(params)

    async def send_transaction(self, params):
        return self.sync.send_transaction(params)

    async def wait_for_transaction_receipt(self, tx_hash, timeout):
        return self.sync.wait_for_transaction_receipt(tx_hash, timeout)


class FakeWeb3:
    def __init__(self, eth):
        self.eth = eth


@pytest.fixture
def account():
    return Account.from_key(PRIVATE_KEY)


@pytest.fixture
def settings():
    return Settings(rpc_url="http://localhost:8545", private_key=PRIVATE_KEY, chain_id=80094)


def test_submit_swap_sync_fills_transaction(swap_payload, account):
    eth = FakeEth()
    swap = SwapResponse(**swap_payload)

    tx_hash = execution.submit_swap_sync(FakeWeb3(eth), account, swap.tx, chain_id=80094)

    sent = eth.sent[0]
    assert tx_hash == Web3.to_hex(TX_HASH)
    assert sent["from"] == account.address
    assert sent["to"] == Web3.to_checksum_address(ROUTER)
    assert sent["data"] == "0xdeadbeef"
    assert sent["value"] == 0
    assert sent["nonce"] == 5
    assert sent["maxPriorityFeePerGas"] == 2
    assert sent["maxFeePerGas"] == 202
    assert sent["chainId"] == 80094
    assert sent["gas"] == 110_000


def test_submit_swap_sync_queries_chain_id_when_not_given(swap_payload, account):
    eth = FakeEth()

    execution.submit_swap_sync(FakeWeb3(eth), account, SwapResponse(**swap_payload).tx)

    assert eth.sent[0]["chainId"] == 1


def test_submit_swap_async_fills_transaction(swap_payload, account):
    eth = FakeAsyncEth()
    swap = SwapResponse(**swap_payload)

    tx_hash = asyncio.run(execution.submit_swap_async(FakeWeb3(eth), account, swap.tx))

    sent = eth.sync.sent[0]
    assert tx_hash == Web3.to_hex(TX_HASH)
    assert sent["chainId"] == 1
    assert sent["gas"] == 110_000
    assert sent["maxFeePerGas"] == 202


def test_execute_swap_sync_waits_for_receipt(swap_payload, settings, account, monkeypatch, caplog):
    eth = FakeEth()
    monkeypatch.setattr(execution, "get_wallet", lambda settings, is_async: (FakeWeb3(eth), account))

    with caplog.at_level("INFO", logger="oogabooga.execution"):
        receipt = execution.execute_swap_sync(SwapResponse(**swap_payload), settings)

    assert receipt["status"] == 1
    assert eth.receipt_requests == [(Web3.to_hex(TX_HASH), execution.DEFAULT_RECEIPT_TIMEOUT_SECONDS)]
    assert eth.sent[0]["chainId"] == 80094
    assert "Swap complete, status: success" in caplog.text


def test_execute_swap_async_waits_for_receipt(swap_payload, settings, account, monkeypatch):
    eth = FakeAsyncEth()
    monkeypatch.setattr(execution, "get_wallet", lambda settings, is_async: (FakeWeb3(eth), account))

    receipt = asyncio.run(execution.execute_swap_async(SwapResponse(**swap_payload), settings))

    assert receipt["status"] == 1
    assert eth.sync.sent[0]["chainId"] == 80094


def test_execute_swap_without_route_raises(settings):
    with pytest.raises(ValueError, match="NoWay"):
        execution.execute_swap_sync(SwapResponse(status="NoWay"), settings)


def test_get_wallet_injects_signer(settings, account):
    w3, wallet_account = execution.get_wallet(settings, is_async=False)

    assert isinstance(w3, Web3)
    assert wallet_account.address == account.address
    assert w3.eth.default_account == account.address


def test_get_wallet_async(settings, account):
    w3, wallet_account = execution.get_wallet(settings, is_async=True)

    assert isinstance(w3, AsyncWeb3)
    assert wallet_account.address == account.address


def test_get_wallet_requires_rpc_url():
    with pytest.raises(ValueError, match="RPC_URL"):
        execution.get_wallet(Settings(private_key=PRIVATE_KEY), is_async=False)
