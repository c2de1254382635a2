"""
Dependency Injection Container for Signataire.

Manages service instances and their dependencies.
"""

from typing import Optional

from signataire.application.status_channel import StatusChannel
from signataire.application.wallet_session import CreateOnLogin, WalletSession
from signataire.config.settings import SignataireConfig, get_settings
from signataire.domain.services.i_auth_provider import IAuthProvider
from signataire.domain.services.i_signature_verifier import ISignatureVerifier
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.infrastructure.auth import SessionAuthProvider
from signataire.infrastructure.crypto import StellarSignatureVerifier
from signataire.infrastructure.provider import PrivyWalletClient


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of all services. Collaborators may be
    injected up front (tests) instead of built from settings.
    """

    def __init__(
        self,
        settings: Optional[SignataireConfig] = None,
        wallet_provider: Optional[IWalletProvider] = None,
        auth_provider: Optional[IAuthProvider] = None,
        signature_verifier: Optional[ISignatureVerifier] = None,
    ):
        """Initialize container with optional overrides."""
        self._settings = settings
        self._wallet_provider = wallet_provider
        self._auth_provider = auth_provider
        self._signature_verifier = signature_verifier
        self._status_channel: Optional[StatusChannel] = None
        self._wallet_session: Optional[WalletSession] = None

    @property
    def settings(self) -> SignataireConfig:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def wallet_provider(self) -> IWalletProvider:
        """Get wallet provider (Privy REST client)."""
        if self._wallet_provider is None:
            provider = self.settings.provider
            if not provider.app_id or not provider.app_secret:
                raise RuntimeError(
                    "Wallet provider credentials missing: set "
                    "SIGNATAIRE_PROVIDER__APP_ID and SIGNATAIRE_PROVIDER__APP_SECRET"
                )
            self._wallet_provider = PrivyWalletClient(
                api_url=provider.api_url,
                app_id=provider.app_id,
                app_secret=provider.app_secret,
                user_id=provider.user_id,
                chain_type=self.settings.chain_type,
                request_timeout=provider.request_timeout,
                connect_timeout=provider.connect_timeout,
            )
        return self._wallet_provider

    @property
    def auth_provider(self) -> IAuthProvider:
        if self._auth_provider is None:
            self._auth_provider = SessionAuthProvider(
                app_id=self.settings.provider.app_id,
                user_id=self.settings.provider.user_id,
            )
        return self._auth_provider

    @property
    def signature_verifier(self) -> ISignatureVerifier:
        if self._signature_verifier is None:
            self._signature_verifier = StellarSignatureVerifier()
        return self._signature_verifier

    @property
    def status_channel(self) -> StatusChannel:
        if self._status_channel is None:
            self._status_channel = StatusChannel()
        return self._status_channel

    @property
    def wallet_session(self) -> WalletSession:
        """Get the session-scoped wallet workflow."""
        if self._wallet_session is None:
            self._wallet_session = WalletSession(
                auth_provider=self.auth_provider,
                wallet_provider=self.wallet_provider,
                signature_verifier=self.signature_verifier,
                status_channel=self.status_channel,
                chain_type=self.settings.chain_type,
                create_on_login=CreateOnLogin(self.settings.wallet.create_on_login),
                example_hash=self.settings.wallet.example_hash,
            )
        return self._wallet_session

    async def shutdown(self) -> None:
        """Release network resources."""
        close = getattr(self._wallet_provider, "close", None)
        if close is not None:
            await close()
