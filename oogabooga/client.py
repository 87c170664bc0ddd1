import json
import logging
from typing import Optional
from httpx import Headers, Response, URL
from deprecated import deprecated
from pydantic import ValidationError
from .http import SwapApiHttpClient
from .types import SwapParams, SwapResponse

logger = logging.getLogger(__name__)

MAINNET_BASE_URL = "https://mainnet.api.oogabooga.io"
BARTIO_BASE_URL = "https://bartio.api.oogabooga.io"

SWAP_ROUTE = "/v1/swap"

class SwapClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class SwapClient:
    """Client for the Ooga Booga swap API.

    This client handles authentication and provides methods for fetching
    ready-to-send swap transactions.
    """

    def __init__(self, api_key: str, base_url: str, http_client: Optional[SwapApiHttpClient] = None):
        """Initialize a new SwapClient.

        Args:
            api_key: The API key for authentication
            base_url: The base URL of the Ooga Booga API
            http_client: An already configured HTTP client to use instead
        """
        self.http_client = http_client or SwapApiHttpClient(base_url, api_key)

    @classmethod
    def new_mainnet_client(cls, api_key: str) -> "SwapClient":
        """Create a new client configured for Berachain mainnet.

        Args:
            api_key: The API key for authentication

        Returns:
            A new SwapClient configured for mainnet
        """
        return cls(api_key, MAINNET_BASE_URL)

    @classmethod
    @deprecated(version="0.1.0", reason="The bArtio testnet has been sunset, use new_mainnet_client")
    def new_bartio_client(cls, api_key: str) -> "SwapClient":
        """Create a new client configured for the bArtio testnet.

        Args:
            api_key: The API key for authentication

        Returns:
            A new SwapClient configured for bArtio
        """
        return cls(api_key, BARTIO_BASE_URL)

    def build_swap_url(self, params: SwapParams) -> str:
        """Build the full swap URL, query string included.

        Args:
            params: The swap to quote

        Returns:
            The URL the swap request is sent to
        """
        url = URL(self.http_client.url_for(SWAP_ROUTE), params=params.to_query_params())
        return str(url)

    async def get_swap(self, params: SwapParams) -> SwapResponse:
        """Request a swap transaction for the given params.

        Args:
            params: The swap to quote

        Returns:
            The swap response, with the transaction to submit

        Raises:
            SwapClientError: If the request fails
        """
        self._log_params(params)
        response = await self.http_client.get_with_headers(
            SWAP_ROUTE, params.to_query_params(), self._get_headers()
        )
        swap = self._handle_response(response)
        self._log_swap(swap)
        return swap

    def get_swap_sync(self, params: SwapParams) -> SwapResponse:
        """Request a swap transaction for the given params synchronously.

        Args:
            params: The swap to quote

        Returns:
            The swap response, with the transaction to submit

        Raises:
            SwapClientError: If the request fails
        """
        self._log_params(params)
        response = self.http_client.get_with_headers_sync(
            SWAP_ROUTE, params.to_query_params(), self._get_headers()
        )
        swap = self._handle_response(response)
        self._log_swap(swap)
        return swap

    def close(self) -> None:
        self.http_client.close()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    def _get_headers(self) -> Headers:
        return Headers({"Accept": "application/json"})

    def _handle_response(self, response: Response) -> SwapResponse:
        """Parse a swap API response.

        Args:
            response: The API response to handle

        Returns:
            The parsed swap response

        Raises:
            SwapClientError: If the response indicates an error or can't be parsed
        """
        if response.status_code != 200:
            raise SwapClientError(
                response.text,
                status_code=response.status_code
            )

        try:
            return SwapResponse(**response.json())
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise SwapClientError(
                f"Malformed swap response: {e}",
                status_code=response.status_code
            ) from e

    def _log_params(self, params: SwapParams) -> None:
        logger.info("swapParams %s", params.to_query_params())

    def _log_swap(self, swap: SwapResponse) -> None:
        if not swap.has_route():
            logger.warning("No route found, status: %s", swap.status)
            return

        logger.info("tx %s", swap.tx.model_dump())
        logger.info("routerParams %s", swap.router_params.model_dump_json(by_alias=True) if swap.router_params else None)
        logger.info("routerAddr %s", swap.router_addr)
        if swap.router_params:
            logger.info("executor %s", swap.router_params.executor)
