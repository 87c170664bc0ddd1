import logging
from typing import Any, Optional, Tuple
from web3 import Web3, AsyncWeb3
from web3.types import TxParams, TxReceipt
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3.middleware import SignAndSendRawMiddlewareBuilder
from .config import Settings
from .types import SwapResponse, SwapTx

logger = logging.getLogger(__name__)

GAS_BUFFER = 1.1
DEFAULT_RECEIPT_TIMEOUT_SECONDS = 120

def get_wallet(settings: Settings, is_async: bool = True) -> Tuple[Web3 | AsyncWeb3, LocalAccount]:
    """Get a Web3 instance and signing account from settings.

    Args:
        settings: The settings holding the RPC URL and private key
        is_async: Whether to return an async Web3 instance

    Returns:
        A tuple of (Web3 instance, LocalAccount)

    Raises:
        ValueError: If RPC_URL or PRIVATE_KEY are not set
    """
    settings.require_wallet()

    rpc_url = settings.rpc_url
    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url)) if is_async else Web3(Web3.HTTPProvider(rpc_url))
    account: LocalAccount = Account.from_key(settings.private_key)
    w3.eth.default_account = account.address
    w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(settings.private_key), layer=0)

    return w3, account

def _swap_tx(swap: SwapResponse) -> SwapTx:
    if swap.tx is None:
        raise ValueError(f"Swap response has no transaction (status: {swap.status})")
    return swap.tx

def _prepare_tx(tx: SwapTx, account: LocalAccount) -> TxParams:
    params = tx.to_tx_params()
    if params["from"] != account.address:
        logger.warning("Swap tx sender %s differs from wallet %s", params["from"], account.address)
    params["from"] = account.address
    return params

def _log_receipt(receipt: Any) -> None:
    status = receipt["status"]
    logger.info("Swap complete, status: %s", "success" if status == 1 else "reverted")

async def submit_swap_async(
    w3: AsyncWeb3, account: LocalAccount, tx: SwapTx, chain_id: Optional[int] = None
) -> str:
    """Fill in and send a swap transaction asynchronously.

    Args:
        w3: The Web3 instance to send through
        account: The signing account
        tx: The swap transaction returned by the API
        chain_id: The chain to send on, queried from the node if omitted

    Returns:
        The transaction hash
    """
    logger.info("Submitting swap...")
    params = _prepare_tx(tx, account)

    # Add required transaction fields
    params['nonce'] = await w3.eth.get_transaction_count(account.address)

    # Get current gas prices
    block = await w3.eth.get_block('latest')
    max_priority_fee = await w3.eth.max_priority_fee
    params['maxFeePerGas'] = 2 * block.baseFeePerGas + max_priority_fee
    params['maxPriorityFeePerGas'] = max_priority_fee
    params['chainId'] = chain_id if chain_id is not None else await w3.eth.chain_id

    gas = await w3.eth.estimate_gas(params)
    params['gas'] = int(gas * GAS_BUFFER)

    tx_hash = Web3.to_hex(await w3.eth.send_transaction(params))
    logger.info("hash %s", tx_hash)
    return tx_hash

def submit_swap_sync(
    w3: Web3, account: LocalAccount, tx: SwapTx, chain_id: Optional[int] = None
) -> str:
    """Fill in and send a swap transaction synchronously.

    Args:
        w3: The Web3 instance to send through
        account: The signing account
        tx: The swap transaction returned by the API
        chain_id: The chain to send on, queried from the node if omitted

    Returns:
        The transaction hash
    """
    logger.info("Submitting swap...")
    params = _prepare_tx(tx, account)

    # Add required transaction fields
    params['nonce'] = w3.eth.get_transaction_count(account.address)

    # Get current gas prices
    block = w3.eth.get_block('latest')
    max_priority_fee = w3.eth.max_priority_fee
    params['maxFeePerGas'] = 2 * block.baseFeePerGas + max_priority_fee
    params['maxPriorityFeePerGas'] = max_priority_fee
    params['chainId'] = chain_id if chain_id is not None else w3.eth.chain_id

    gas = w3.eth.estimate_gas(params)
    params['gas'] = int(gas * GAS_BUFFER)

    tx_hash = Web3.to_hex(w3.eth.send_transaction(params))
    logger.info("hash %s", tx_hash)
    return tx_hash

async def wait_for_receipt_async(
    w3: AsyncWeb3, tx_hash: str, timeout: float = DEFAULT_RECEIPT_TIMEOUT_SECONDS
) -> TxReceipt:
    receipt = await w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
    _log_receipt(receipt)
    return receipt

def wait_for_receipt_sync(
    w3: Web3, tx_hash: str, timeout: float = DEFAULT_RECEIPT_TIMEOUT_SECONDS
) -> TxReceipt:
    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
    _log_receipt(receipt)
    return receipt

async def execute_swap_async(swap: SwapResponse, settings: Settings) -> TxReceipt:
    """Submit the swap transaction and wait for its receipt asynchronously.

    Args:
        swap: The swap response to execute
        settings: Wallet and chain settings

    Returns:
        The transaction receipt
    """
    tx = _swap_tx(swap)
    (w3, account) = get_wallet(settings, is_async=True)
    tx_hash = await submit_swap_async(w3, account, tx, settings.chain_id)
    return await wait_for_receipt_async(w3, tx_hash)

def execute_swap_sync(swap: SwapResponse, settings: Settings) -> TxReceipt:
    """Submit the swap transaction and wait for its receipt synchronously.

    Args:
        swap: The swap response to execute
        settings: Wallet and chain settings

    Returns:
        The transaction receipt
    """
    tx = _swap_tx(swap)
    (w3, account) = get_wallet(settings, is_async=False)
    tx_hash = submit_swap_sync(w3, account, tx, settings.chain_id)
    return wait_for_receipt_sync(w3, tx_hash)
