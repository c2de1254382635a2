"""
Unit tests for the Privy wallet provider client.

Runs the client against a local aiohttp test server.

Usage:
    pytest tests/unit/infrastructure/test_privy_wallet_client.py
"""

import asyncio
import base64

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from signataire.domain.exceptions import ErrorKind, ProviderCallError
from signataire.domain.value_objects import ChainType, SigningRequest
from signataire.infrastructure.provider import PrivyWalletClient

ADDRESS = "GBX4ZJ7KXQ3V5DLLXDGZ2NUMQW3BDOUXIF3PKBNHJRJVQTNPVQZ4LYXU"


class FakePrivyApi:
    """Minimal Privy wallet API recording incoming requests."""

    def __init__(self):
        self.requests = []
        self.pages = {
            None: {
                "data": [
                    {"id": "w1", "address": ADDRESS, "chain_type": "stellar"},
                ],
                "next_cursor": "page2",
            },
            "page2": {
                "data": [
                    {"id": "w2", "address": ADDRESS, "chain_type": "stellar"},
                ],
                "next_cursor": None,
            },
        }
        self.sign_response = web.json_response(
            {"method": "raw_sign", "data": {"signature": "0xabcd", "encoding": "hex"}}
        )
        self.sign_delay = 0.0

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/v1/wallets", self.list_wallets)
        app.router.add_post("/v1/wallets", self.create_wallet)
        app.router.add_post("/v1/wallets/{wallet_id}/raw_sign", self.raw_sign)
        return app

    async def _record(self, request: web.Request) -> None:
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "query": dict(request.query),
                "headers": request.headers.copy(),
                "body": body,
            }
        )

    async def list_wallets(self, request: web.Request) -> web.Response:
        await self._record(request)
        return web.json_response(self.pages[request.query.get("cursor")])

    async def create_wallet(self, request: web.Request) -> web.Response:
        await self._record(request)
        body = await request.json()
        return web.json_response(
            {"id": "w-new", "address": ADDRESS, "chain_type": body["chain_type"]}
        )

    async def raw_sign(self, request: web.Request) -> web.Response:
        await self._record(request)
        if self.sign_delay:
            await asyncio.sleep(self.sign_delay)
        return self.sign_response


@pytest_asyncio.fixture
async def api():
    fake = FakePrivyApi()
    server = TestServer(fake.app())
    await server.start_server()
    fake.base_url = str(server.make_url(""))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def client(api):
    client = PrivyWalletClient(
        api_url=api.base_url,
        app_id="test-app",
        app_secret="test-secret",
        user_id="did:privy:user",
    )
    yield client
    await client.close()


class TestPrivyWalletClient:
    """Unit tests for PrivyWalletClient."""

    async def test_auth_headers(self, api, client):
        """Test Basic auth and app id header are sent."""
        await client.list_wallets()

        headers = api.requests[0]["headers"]
        expected = base64.b64encode(b"test-app:test-secret").decode()
        assert headers["Authorization"] == f"Basic {expected}"
        assert headers["privy-app-id"] == "test-app"

    async def test_list_wallets_follows_cursor(self, api, client):
        """Test pagination is followed until next_cursor is empty."""
        wallets = await client.list_wallets()

        assert [w.id for w in wallets] == ["w1", "w2"]
        assert api.requests[0]["query"] == {
            "chain_type": "stellar",
            "user_id": "did:privy:user",
        }
        assert api.requests[1]["query"]["cursor"] == "page2"

    async def test_create_wallet(self, api, client):
        wallet = await client.create_wallet(ChainType.STELLAR)

        assert wallet.id == "w-new"
        assert wallet.address == ADDRESS
        assert api.requests[0]["body"] == {
            "chain_type": "stellar",
            "owner": {"user_id": "did:privy:user"},
        }

    async def test_create_wallet_without_owner(self, api):
        client = PrivyWalletClient(
            api_url=api.base_url, app_id="test-app", app_secret="test-secret"
        )
        try:
            await client.create_wallet(ChainType.STELLAR)
        finally:
            await client.close()

        assert api.requests[0]["body"] == {"chain_type": "stellar"}

    async def test_raw_sign_by_wallet_id(self, api, client, example_hash):
        """Test raw sign targets the wallet id path with the hash."""
        request = SigningRequest(
            chain_type=ChainType.STELLAR, wallet_id="w1", hash=example_hash
        )

        signature = await client.raw_sign(request)

        assert signature == "0xabcd"
        assert api.requests[0]["path"] == "/v1/wallets/w1/raw_sign"
        assert api.requests[0]["body"] == {"params": {"hash": example_hash}}

    async def test_provider_error_message(self, api, client, example_hash):
        """Test JSON error text becomes the ProviderCallError message."""
        api.sign_response = web.json_response({"error": "rate limited"}, status=429)

        with pytest.raises(ProviderCallError) as exc_info:
            await client.raw_sign(
                SigningRequest(ChainType.STELLAR, "w1", example_hash)
            )

        assert exc_info.value.message == "rate limited"
        assert exc_info.value.status_code == 429
        assert exc_info.value.kind is ErrorKind.PROVIDER_CALL

    async def test_provider_plain_text_error(self, api, client, example_hash):
        api.sign_response = web.Response(text="upstream unavailable", status=503)

        with pytest.raises(ProviderCallError, match="upstream unavailable"):
            await client.raw_sign(
                SigningRequest(ChainType.STELLAR, "w1", example_hash)
            )

    async def test_malformed_sign_response(self, api, client, example_hash):
        api.sign_response = web.json_response({"data": {}})

        with pytest.raises(ProviderCallError, match="Malformed raw_sign response"):
            await client.raw_sign(
                SigningRequest(ChainType.STELLAR, "w1", example_hash)
            )

    async def test_not_retried(self, api, client, example_hash):
        """Test a failed call is made exactly once."""
        api.sign_response = web.json_response({"error": "nope"}, status=500)

        with pytest.raises(ProviderCallError):
            await client.raw_sign(
                SigningRequest(ChainType.STELLAR, "w1", example_hash)
            )

        assert len(api.requests) == 1

    async def test_timeout(self, api, example_hash):
        """Test configured request timeout maps to ProviderCallError."""
        api.sign_delay = 2.0
        client = PrivyWalletClient(
            api_url=api.base_url,
            app_id="test-app",
            app_secret="test-secret",
            request_timeout=1.0,
        )
        try:
            with pytest.raises(ProviderCallError, match="timed out"):
                await client.raw_sign(
                    SigningRequest(ChainType.STELLAR, "w1", example_hash)
                )
        finally:
            await client.close()

    async def test_connection_error(self, example_hash):
        """Test unreachable provider maps to ProviderCallError."""
        client = PrivyWalletClient(
            api_url="http://127.0.0.1:1",
            app_id="test-app",
            app_secret="test-secret",
        )
        try:
            with pytest.raises(ProviderCallError):
                await client.raw_sign(
                    SigningRequest(ChainType.STELLAR, "w1", example_hash)
                )
        finally:
            await client.close()
