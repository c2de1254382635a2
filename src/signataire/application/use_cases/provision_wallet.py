"""
Provision Wallet use case.

Creates an embedded wallet for the target chain through the wallet
provider and reports progress on the status channel.
"""

from typing import Optional

from signataire.application.action_guard import ActionGuard
from signataire.application.status_channel import (
    FAILURE_GLYPH,
    SUCCESS_GLYPH,
    StatusChannel,
)
from signataire.domain.entities.wallet import Wallet
from signataire.domain.exceptions import (
    OperationInProgressError,
    ProviderCallError,
)
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.domain.value_objects.chain_type import ChainType
from signataire.infrastructure.monitoring import action_ctx, get_logger

logger = get_logger(__name__)


class ProvisionWallet:
    """
    Create a new embedded wallet.

    Business rules:
    - Publishes "Creating ... wallet…" before the provider call
    - Publishes "✅ Wallet created" with the address on success
    - Provider failures are not retried; they end the action with a
      single "❌ Failed: ..." status
    - Does not check for an existing wallet (callers gate on the resolver)
    """

    def __init__(
        self,
        wallet_provider: IWalletProvider,
        status_channel: StatusChannel,
        action_guard: ActionGuard,
    ):
        """
        Initialize use case with dependencies.

        Args:
            wallet_provider: External embedded-wallet provider
            status_channel: Status display channel
            action_guard: Guard shared with the signing use case
        """
        self.wallet_provider = wallet_provider
        self.status_channel = status_channel
        self.action_guard = action_guard

    async def execute(
        self, chain_type: ChainType = ChainType.STELLAR
    ) -> Optional[Wallet]:
        """
        Execute wallet provisioning.

        Args:
            chain_type: Chain to create the wallet on

        Returns:
            Created wallet, or None if creation failed or another action
            was already running
        """
        try:
            async with self.action_guard.hold("create_wallet"):
                token = action_ctx.set("create_wallet")
                try:
                    return await self._provision(chain_type)
                finally:
                    action_ctx.reset(token)
        except OperationInProgressError as e:
            logger.warning(f"Wallet creation skipped: {e.message}")
            return None

    async def _provision(self, chain_type: ChainType) -> Optional[Wallet]:
        self.status_channel.publish(f"Creating {chain_type.display_name} wallet…")

        try:
            wallet = await self.wallet_provider.create_wallet(chain_type)
        except ProviderCallError as e:
            return self._fail(e.message)
        except Exception as e:
            logger.exception("Unexpected wallet provider failure")
            return self._fail(str(e) or e.__class__.__name__)

        logger.info(f"Wallet created: id={wallet.id} address={wallet.address}")
        self.status_channel.publish(f"{SUCCESS_GLYPH} Wallet created\n{wallet.address}")
        return wallet

    def _fail(self, message: str) -> None:
        logger.error(f"Wallet creation failed: {message}")
        self.status_channel.publish(f"{FAILURE_GLYPH} Failed: {message}")
        return None
