"""
Test fixtures and configuration.
"""

import pytest

from signataire.application.status_channel import StatusChannel
from signataire.application.wallet_session import CreateOnLogin, WalletSession
from signataire.config.settings import EXAMPLE_HASH, reset_settings
from signataire.infrastructure.auth import SessionAuthProvider
from signataire.infrastructure.crypto import StellarSignatureVerifier
from tests.helpers import FakeWalletProvider


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test loads settings from scratch."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def example_hash() -> str:
    return EXAMPLE_HASH


@pytest.fixture
def fake_provider() -> FakeWalletProvider:
    return FakeWalletProvider()


@pytest.fixture
def auth_provider() -> SessionAuthProvider:
    return SessionAuthProvider(app_id="test-app", user_id="did:privy:test-user")


@pytest.fixture
def status_channel() -> StatusChannel:
    return StatusChannel()


@pytest.fixture
def session(auth_provider, fake_provider, status_channel) -> WalletSession:
    """Session with auto-provisioning disabled."""
    return WalletSession(
        auth_provider=auth_provider,
        wallet_provider=fake_provider,
        signature_verifier=StellarSignatureVerifier(),
        status_channel=status_channel,
        create_on_login=CreateOnLogin.OFF,
        example_hash=EXAMPLE_HASH,
    )
