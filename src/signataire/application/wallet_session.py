"""
Wallet session - orchestration context for one user session.

Owns the transient state (known wallets, wallet created in this session,
last signing result) and gates every action on the auth provider.
"""

from enum import Enum
from typing import List, Optional

from signataire.application.action_guard import ActionGuard
from signataire.application.status_channel import FAILURE_GLYPH, StatusChannel
from signataire.application.use_cases.provision_wallet import ProvisionWallet
from signataire.application.use_cases.sign_and_verify import SignAndVerify
from signataire.domain.entities.wallet import Wallet
from signataire.domain.exceptions import PreconditionSkip, SignataireException
from signataire.domain.services.i_auth_provider import IAuthProvider
from signataire.domain.services.i_signature_verifier import ISignatureVerifier
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.domain.services.wallet_resolver import resolve_active_wallet
from signataire.domain.value_objects.chain_type import ChainType
from signataire.domain.value_objects.signing_result import SigningResult
from signataire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class CreateOnLogin(str, Enum):
    """Auto-provisioning policy applied after login."""

    OFF = "off"
    USERS_WITHOUT_WALLETS = "users-without-wallets"
    ALL_USERS = "all-users"


class WalletSession:
    """
    Session-scoped wallet workflow.

    Business rules:
    - Wallet and signing actions require ready and authenticated auth
    - The active wallet is resolved on demand (never cached)
    - create_wallet only runs when no active wallet exists
    - sign only runs when an active wallet exists
    """

    def __init__(
        self,
        auth_provider: IAuthProvider,
        wallet_provider: IWalletProvider,
        signature_verifier: ISignatureVerifier,
        status_channel: Optional[StatusChannel] = None,
        chain_type: ChainType = ChainType.STELLAR,
        create_on_login: CreateOnLogin = CreateOnLogin.OFF,
        example_hash: Optional[str] = None,
    ):
        """
        Initialize session.

        Args:
            auth_provider: Authentication/session provider
            wallet_provider: Embedded wallet provider
            signature_verifier: Local signature verifier
            status_channel: Status display channel (created if omitted)
            chain_type: Supported chain
            create_on_login: Auto-provisioning policy
            example_hash: Hash signed when sign() is called without one
        """
        self.auth_provider = auth_provider
        self.wallet_provider = wallet_provider
        self.status_channel = status_channel or StatusChannel()
        self.chain_type = chain_type
        self.create_on_login = CreateOnLogin(create_on_login)
        self.example_hash = example_hash

        self.action_guard = ActionGuard()
        self.provision_wallet = ProvisionWallet(
            wallet_provider=wallet_provider,
            status_channel=self.status_channel,
            action_guard=self.action_guard,
        )
        self.sign_and_verify = SignAndVerify(
            wallet_provider=wallet_provider,
            signature_verifier=signature_verifier,
            status_channel=self.status_channel,
            action_guard=self.action_guard,
        )

        self.known_wallets: List[Wallet] = []
        self.recently_created: Optional[Wallet] = None
        self.last_result: Optional[SigningResult] = None

    # ================================================================
    # Derived state
    # ================================================================

    @property
    def status(self) -> str:
        return self.status_channel.current

    @property
    def active_wallet(self) -> Optional[Wallet]:
        """Active wallet for the session's chain."""
        return resolve_active_wallet(
            self.known_wallets, self.recently_created, self.chain_type
        )

    @property
    def can_act(self) -> bool:
        return self.auth_provider.ready and self.auth_provider.authenticated

    def _require_session(self, action: str) -> None:
        if not self.auth_provider.ready:
            raise PreconditionSkip(f"{action}: auth provider not ready")
        if not self.auth_provider.authenticated:
            raise PreconditionSkip(f"{action}: not authenticated")

    # ================================================================
    # Session lifecycle
    # ================================================================

    async def login(self) -> None:
        """
        Log in, load wallets and apply the auto-provisioning policy.

        Only one wallet per chain is supported, so both auto policies
        create a wallet only when the user has none.
        """
        await self.auth_provider.login()
        if not self.can_act:
            logger.warning("Login did not produce an authenticated session")
            return

        await self.refresh_wallets()

        if self.create_on_login is CreateOnLogin.OFF:
            return
        if self.active_wallet is None:
            logger.info(f"Auto-provisioning wallet ({self.create_on_login.value})")
            await self.create_wallet()

    async def logout(self) -> None:
        """Log out and drop session-local wallet state."""
        await self.auth_provider.logout()
        self.known_wallets = []
        self.recently_created = None
        self.last_result = None

    # ================================================================
    # Actions
    # ================================================================

    async def refresh_wallets(self) -> List[Wallet]:
        """
        Reload the provider's wallet list.

        On failure the previous list is kept and the error is published.

        Returns:
            Current known wallets
        """
        try:
            self._require_session("refresh_wallets")
        except PreconditionSkip as e:
            logger.debug(f"Skipped: {e.reason}")
            return self.known_wallets

        try:
            self.known_wallets = list(await self.wallet_provider.list_wallets())
        except SignataireException as e:
            self._listing_failed(e.message)
        except Exception as e:
            logger.exception("Unexpected wallet provider failure")
            self._listing_failed(str(e) or e.__class__.__name__)

        return self.known_wallets

    def _listing_failed(self, message: str) -> None:
        logger.error(f"Wallet listing failed: {message}")
        self.status_channel.publish(f"{FAILURE_GLYPH} Failed: {message}")

    async def create_wallet(self) -> Optional[Wallet]:
        """
        Create a wallet if the session has none.

        Returns:
            Created wallet, or None if skipped or failed
        """
        try:
            self._require_session("create_wallet")
            if self.active_wallet is not None:
                raise PreconditionSkip("create_wallet: wallet already exists")
        except PreconditionSkip as e:
            logger.debug(f"Skipped: {e.reason}")
            return None

        wallet = await self.provision_wallet.execute(self.chain_type)
        if wallet is not None:
            self.recently_created = wallet
        return wallet

    async def sign(self, hash_hex: Optional[str] = None) -> Optional[SigningResult]:
        """
        Sign a hash with the active wallet and verify it.

        Args:
            hash_hex: 0x-prefixed hex hash (defaults to the example hash)

        Returns:
            SigningResult, or None if skipped or failed
        """
        try:
            self._require_session("sign")
            wallet = self.active_wallet
            if wallet is None:
                raise PreconditionSkip("sign: no active wallet")
            hash_hex = hash_hex or self.example_hash
            if not hash_hex:
                raise PreconditionSkip("sign: no hash to sign")
        except PreconditionSkip as e:
            logger.debug(f"Skipped: {e.reason}")
            return None

        result = await self.sign_and_verify.execute(wallet, hash_hex)
        if result is not None:
            self.last_result = result
        return result
