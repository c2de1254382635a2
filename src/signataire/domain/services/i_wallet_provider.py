"""
Wallet provider interface.

Defines operations of the external service that holds custody of
embedded wallets.
"""

from abc import ABC, abstractmethod
from typing import List

from signataire.domain.entities.wallet import Wallet
from signataire.domain.value_objects.chain_type import ChainType
from signataire.domain.value_objects.signing_request import SigningRequest


class IWalletProvider(ABC):
    """
    Abstract interface for the embedded wallet provider.

    The provider creates, enumerates and signs with wallets. It is a
    remote service: every call may suspend and may fail.
    """

    @abstractmethod
    async def list_wallets(self) -> List[Wallet]:
        """
        List wallets known to the provider for the current user.

        Returns:
            Wallets in provider order (any chain)

        Raises:
            ProviderCallError: If the provider call fails
        """

    @abstractmethod
    async def create_wallet(self, chain_type: ChainType) -> Wallet:
        """
        Create a new embedded wallet.

        Args:
            chain_type: Chain to create the wallet on

        Returns:
            The newly created wallet

        Raises:
            ProviderCallError: If the provider call fails
        """

    @abstractmethod
    async def raw_sign(self, request: SigningRequest) -> str:
        """
        Sign a raw hash with the wallet identified by request.wallet_id.

        Args:
            request: Chain, wallet id and 0x-prefixed hash

        Returns:
            0x-prefixed hex signature

        Raises:
            ProviderCallError: If the provider call fails
        """
