"""
Privy wallet provider client implementation.

HTTP client for the Privy embedded-wallet REST API.
Provider failures are surfaced once, never retried.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp
from prometheus_client import Counter, Histogram

from signataire.domain.entities.wallet import Wallet
from signataire.domain.exceptions.provider import ProviderCallError
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.domain.value_objects.chain_type import ChainType
from signataire.domain.value_objects.signing_request import SigningRequest
from signataire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

# Prometheus Metrics
wallet_provider_requests_total = Counter(
    "wallet_provider_requests_total",
    "Total wallet provider requests",
    ["operation", "status"],
)

wallet_provider_request_duration = Histogram(
    "wallet_provider_request_duration_seconds",
    "Wallet provider request duration",
    ["operation"],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)


class PrivyWalletClient(IWalletProvider):
    """
    Privy REST API client for embedded wallets.

    Authenticates with the app id/secret pair (HTTP Basic) and scopes
    wallet listing and creation to the configured user, if any.
    """

    def __init__(
        self,
        api_url: str,
        app_id: str,
        app_secret: str,
        user_id: Optional[str] = None,
        chain_type: ChainType = ChainType.STELLAR,
        request_timeout: Optional[float] = None,
        connect_timeout: float = 10.0,
    ):
        """
        Initialize Privy client.

        Args:
            api_url: Privy API base URL
            app_id: Privy application identifier
            app_secret: Privy application secret
            user_id: Optional owner user id (Privy DID)
            chain_type: Chain used when listing wallets
            request_timeout: Total request timeout (None: unbounded)
            connect_timeout: Connection timeout
        """
        self.api_url = api_url.rstrip("/")
        self.app_id = app_id
        self.app_secret = app_secret
        self.user_id = user_id
        self.chain_type = chain_type
        self.request_timeout = request_timeout
        self.timeout = aiohttp.ClientTimeout(
            total=request_timeout,
            connect=connect_timeout,
        )
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                auth=aiohttp.BasicAuth(self.app_id, self.app_secret),
                headers={"privy-app-id": self.app_id},
            )
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[dict] = None,
    ) -> Dict[str, Any]:
        """
        Single HTTP request to the provider.

        Args:
            method: HTTP method
            path: API path (e.g., '/v1/wallets')
            operation: Operation name for metrics and errors
            params: Query parameters
            payload: JSON body

        Returns:
            Decoded JSON response

        Raises:
            ProviderCallError: On any non-2xx response, network error,
                timeout or undecodable body
        """
        session = await self._get_session()
        url = f"{self.api_url}{path}"

        try:
            with wallet_provider_request_duration.labels(operation=operation).time():
                async with session.request(
                    method, url, params=params, json=payload
                ) as response:
                    if response.status >= 300:
                        message = await self._error_message(response)
                        wallet_provider_requests_total.labels(
                            operation=operation, status="rejected"
                        ).inc()
                        raise ProviderCallError(message, status_code=response.status)

                    data = await response.json(content_type=None)

        # Checked first: aiohttp socket timeouts are also ClientErrors
        except asyncio.TimeoutError as e:
            wallet_provider_requests_total.labels(
                operation=operation, status="timeout"
            ).inc()
            raise ProviderCallError(
                f"{operation} timed out after {self.request_timeout}s"
            ) from e

        except aiohttp.ClientError as e:
            wallet_provider_requests_total.labels(
                operation=operation, status="error"
            ).inc()
            raise ProviderCallError(str(e) or e.__class__.__name__) from e

        except ValueError as e:
            wallet_provider_requests_total.labels(
                operation=operation, status="error"
            ).inc()
            raise ProviderCallError(f"Invalid JSON from provider: {e}") from e

        if not isinstance(data, dict):
            raise ProviderCallError(f"Unexpected {operation} response: {data!r}")

        wallet_provider_requests_total.labels(operation=operation, status="success").inc()
        return data

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        """Extract the provider's error text from a failed response."""
        text = await response.text()
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None

        if isinstance(body, dict):
            for key in ("error", "message"):
                if body.get(key):
                    return str(body[key])

        return text.strip() or f"HTTP {response.status}"

    async def list_wallets(self) -> List[Wallet]:
        """
        List the user's wallets on the configured chain.

        Follows 'next_cursor' pagination until exhausted.

        Returns:
            Wallets in provider order

        Raises:
            ProviderCallError: If any page request fails
        """
        wallets: List[Wallet] = []
        cursor: Optional[str] = None

        while True:
            params = {"chain_type": self.chain_type.value}
            if self.user_id:
                params["user_id"] = self.user_id
            if cursor:
                params["cursor"] = cursor

            data = await self._request(
                "GET", "/v1/wallets", operation="list_wallets", params=params
            )

            wallets.extend(Wallet.from_dict(item) for item in data.get("data", []))

            cursor = data.get("next_cursor")
            if not cursor:
                break

        logger.debug(f"Listed {len(wallets)} wallet(s) from provider")
        return wallets

    async def create_wallet(self, chain_type: ChainType) -> Wallet:
        """
        Create an embedded wallet.

        Args:
            chain_type: Chain to create the wallet on

        Returns:
            Created wallet

        Raises:
            ProviderCallError: If creation fails
        """
        payload: Dict[str, Any] = {"chain_type": chain_type.value}
        if self.user_id:
            payload["owner"] = {"user_id": self.user_id}

        data = await self._request(
            "POST", "/v1/wallets", operation="create_wallet", payload=payload
        )
        return Wallet.from_dict(data)

    async def raw_sign(self, request: SigningRequest) -> str:
        """
        Sign a raw hash with an embedded wallet.

        Args:
            request: Signing request (wallet id, not address)

        Returns:
            0x-prefixed hex signature

        Raises:
            ProviderCallError: If signing fails or response is malformed
        """
        data = await self._request(
            "POST",
            f"/v1/wallets/{request.wallet_id}/raw_sign",
            operation="raw_sign",
            payload={"params": {"hash": request.hash}},
        )

        signature = (data.get("data") or {}).get("signature")
        if not signature:
            raise ProviderCallError(f"Malformed raw_sign response: {data!r}")

        return signature
