import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import find_dotenv, load_dotenv
from .client import MAINNET_BASE_URL
from .types import DEFAULT_SLIPPAGE

DEFAULT_CHAIN_ID = 31337

_TRUTHY = {"1", "true", "yes", "on"}

@dataclass
class Settings:
    api_key: str = ""
    api_url: str = MAINNET_BASE_URL
    private_key: Optional[str] = None
    rpc_url: Optional[str] = None
    chain_id: int = DEFAULT_CHAIN_ID
    slippage: float = DEFAULT_SLIPPAGE
    submit_swap: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> "Settings":
        """Read settings from the environment.

        Args:
            environ: The mapping to read from, ``os.environ`` by default
            dotenv: Whether to load a ``.env`` file into the environment first

        Returns:
            The parsed settings

        Raises:
            ValueError: If a numeric variable can't be parsed
        """
        if environ is None:
            if dotenv:
                load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        try:
            chain_id = int(environ.get("CHAIN_ID") or DEFAULT_CHAIN_ID)
        except ValueError:
            raise ValueError(f"CHAIN_ID must be an integer, got {environ['CHAIN_ID']!r}")
        try:
            slippage = float(environ.get("SLIPPAGE") or DEFAULT_SLIPPAGE)
        except ValueError:
            raise ValueError(f"SLIPPAGE must be a number, got {environ['SLIPPAGE']!r}")

        return cls(
            api_key=environ.get("OOGABOGA_API_KEY", ""),
            api_url=environ.get("OOGABOOGA_API_URL") or MAINNET_BASE_URL,
            private_key=environ.get("PRIVATE_KEY") or None,
            rpc_url=environ.get("RPC_URL") or None,
            chain_id=chain_id,
            slippage=slippage,
            submit_swap=environ.get("SUBMIT_SWAP", "").strip().lower() in _TRUTHY,
        )

    def require_wallet(self) -> None:
        """
        Raises:
            ValueError: If the variables needed to sign and send are not set
        """
        if not self.rpc_url:
            raise ValueError("RPC_URL environment variable not set")
        if not self.private_key:
            raise ValueError("PRIVATE_KEY environment variable not set")
