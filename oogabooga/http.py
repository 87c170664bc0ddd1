from typing import Any, Mapping, Optional
from httpx import AsyncBaseTransport, AsyncClient, BaseTransport, Client, Headers, Response

DEFAULT_TIMEOUT_SECONDS = 30.0
AUTHORIZATION_HEADER_NAME = "Authorization"

class SwapApiHttpClient:
    """HTTP client for making authenticated requests to the Ooga Booga API.

    Every request carries the API key as a bearer token.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize a new SwapApiHttpClient.

        Args:
            base_url: The base URL of the swap API
            api_key: The API key sent as a bearer token
            transport: Optional transport for the sync client
            async_transport: Optional transport for the async client
            timeout: Request timeout in seconds
        """
        self.async_client = AsyncClient(transport=async_transport, timeout=timeout)
        self.sync_client = Client(transport=transport, timeout=timeout)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a GET request without custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters to append to the URL

        Returns:
            The API response
        """
        return await self.get_with_headers(path, params, Headers())

    def get_sync(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        """Make a synchronous GET request without custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters to append to the URL

        Returns:
            The API response
        """
        return self.get_with_headers_sync(path, params, Headers())

    async def get_with_headers(
        self,
        path: str,
        params: Optional[Mapping[str, Any]],
        custom_headers: Headers,
    ) -> Response:
        """Make a GET request with custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters to append to the URL
            custom_headers: Additional headers to include

        Returns:
            The API response
        """
        url = self.url_for(path)
        headers = self._add_auth(custom_headers)
        response = await self.async_client.get(url, params=params, headers=headers)
        return response

    def get_with_headers_sync(
        self,
        path: str,
        params: Optional[Mapping[str, Any]],
        custom_headers: Headers,
    ) -> Response:
        """Make a synchronous GET request with custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters to append to the URL
            custom_headers: Additional headers to include

        Returns:
            The API response
        """
        url = self.url_for(path)
        headers = self._add_auth(custom_headers)
        response = self.sync_client.get(url, params=params, headers=headers)
        return response

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _add_auth(self, headers: Headers) -> Headers:
        """Add the bearer token header to a request.

        Args:
            headers: The existing headers

        Returns:
            Headers with authentication information added
        """
        headers[AUTHORIZATION_HEADER_NAME] = f"Bearer {self.api_key}"
        return headers

    def close(self) -> None:
        self.sync_client.close()

    async def aclose(self) -> None:
        await self.async_client.aclose()
