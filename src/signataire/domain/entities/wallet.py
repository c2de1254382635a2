"""
Wallet entity - a provisioned embedded chain account.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from signataire.domain.exceptions.provider import ProviderCallError
from signataire.domain.value_objects.chain_type import ChainType


@dataclass(frozen=True)
class Wallet:
    """
    Embedded wallet held by the wallet provider.

    Created by the provider (on request or on login) and never mutated
    afterwards. The provider may list wallets of chains signataire does
    not support, so the chain is kept as the provider's raw tag.

    Attributes:
        id: Opaque provider identifier, used for all provider operations
        address: Chain-native public key encoding (display + verification)
        chain_type: Chain tag reported by the provider (lowercase)
    """

    id: str
    address: str
    chain_type: str

    def __post_init__(self):
        # Normalize enum members and mixed-case tags to the plain tag
        tag = self.chain_type
        if isinstance(tag, ChainType):
            tag = tag.value
        object.__setattr__(self, "chain_type", str(tag).lower())

    def is_chain(self, chain: "ChainType | str") -> bool:
        """Check whether this wallet belongs to the given chain."""
        target = chain.value if isinstance(chain, ChainType) else str(chain).lower()
        return self.chain_type == target

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Wallet":
        """
        Build wallet from a provider payload.

        Accepts both snake_case ('chain_type') and camelCase ('chainType')
        chain keys.

        Raises:
            ProviderCallError: If the payload lacks id, address or chain
        """
        wallet_id = payload.get("id")
        address = payload.get("address")
        chain = payload.get("chain_type", payload.get("chainType"))

        if not wallet_id or not address or not chain:
            raise ProviderCallError(f"Malformed wallet payload: {dict(payload)!r}")

        return cls(id=str(wallet_id), address=str(address), chain_type=str(chain))
