"""
Sign And Verify use case.

Requests a raw signature over a hash from the wallet provider and
verifies it locally against the wallet's address.
"""

from typing import Optional

from signataire.application.action_guard import ActionGuard
from signataire.application.status_channel import FAILURE_GLYPH, StatusChannel
from signataire.domain.entities.wallet import Wallet
from signataire.domain.exceptions import (
    OperationInProgressError,
    ProviderCallError,
    SignataireException,
)
from signataire.domain.services.i_signature_verifier import ISignatureVerifier
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.domain.value_objects.chain_type import ChainType
from signataire.domain.value_objects.signing_request import SigningRequest
from signataire.domain.value_objects.signing_result import SigningResult
from signataire.infrastructure.codec import hex_to_bytes
from signataire.infrastructure.monitoring import action_ctx, get_logger

logger = get_logger(__name__)


class SignAndVerify:
    """
    Sign a hash with an embedded wallet and verify the signature.

    Business rules:
    - No wallet means no-op: nothing is published
    - The provider is addressed by wallet id, never by address
    - Exactly one status at start and one terminal status
    - Any failure (provider, decoding, address format) ends the action
      with "❌ Signing failed: ..." and no result
    - A signature that does not verify is a result, not a failure
    """

    def __init__(
        self,
        wallet_provider: IWalletProvider,
        signature_verifier: ISignatureVerifier,
        status_channel: StatusChannel,
        action_guard: ActionGuard,
    ):
        """
        Initialize use case with dependencies.

        Args:
            wallet_provider: External embedded-wallet provider
            signature_verifier: Local signature verifier
            status_channel: Status display channel
            action_guard: Guard shared with the provisioning use case
        """
        self.wallet_provider = wallet_provider
        self.signature_verifier = signature_verifier
        self.status_channel = status_channel
        self.action_guard = action_guard

    async def execute(
        self, wallet: Optional[Wallet], hash_hex: str
    ) -> Optional[SigningResult]:
        """
        Execute sign and verify.

        Args:
            wallet: Active wallet (None skips the action)
            hash_hex: 0x-prefixed hex hash to sign

        Returns:
            SigningResult, or None if skipped or failed
        """
        if wallet is None:
            logger.debug("Signing skipped: no active wallet")
            return None

        try:
            async with self.action_guard.hold("sign"):
                token = action_ctx.set("sign")
                try:
                    return await self._sign_and_verify(wallet, hash_hex)
                finally:
                    action_ctx.reset(token)
        except OperationInProgressError as e:
            logger.warning(f"Signing skipped: {e.message}")
            return None

    async def _sign_and_verify(
        self, wallet: Wallet, hash_hex: str
    ) -> Optional[SigningResult]:
        self.status_channel.publish("Requesting signature…")

        try:
            # 1. Remote raw sign (keyed by wallet id)
            request = SigningRequest(
                chain_type=ChainType.from_tag(wallet.chain_type),
                wallet_id=wallet.id,
                hash=hash_hex,
            )
            signature = await self._request_signature(request)

            # 2. Decode hash and signature
            hash_bytes = hex_to_bytes(hash_hex)
            signature_bytes = hex_to_bytes(signature)

            # 3. Verify locally against the wallet's public key
            verified = self.signature_verifier.verify(
                wallet.address, hash_bytes, signature_bytes
            )

        except SignataireException as e:
            return self._fail(e.message)
        except ValueError as e:
            return self._fail(str(e))
        except Exception as e:
            logger.exception("Unexpected failure while verifying signature")
            return self._fail(str(e) or e.__class__.__name__)

        result = SigningResult(signature=signature, verified=verified)
        logger.info(f"Signature received for wallet {wallet.id}: verified={verified}")
        self.status_channel.publish(
            f"Signature: {result.signature}\nVerified? {result.verified_glyph}"
        )
        return result

    async def _request_signature(self, request: SigningRequest) -> str:
        """Call the provider, normalizing unexpected errors."""
        try:
            return await self.wallet_provider.raw_sign(request)
        except SignataireException:
            raise
        except Exception as e:
            logger.exception("Unexpected wallet provider failure")
            raise ProviderCallError(str(e) or e.__class__.__name__) from e

    def _fail(self, message: str) -> None:
        logger.error(f"Signing failed: {message}")
        self.status_channel.publish(f"{FAILURE_GLYPH} Signing failed: {message}")
        return None
