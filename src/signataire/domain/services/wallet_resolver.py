"""
Active wallet resolution.
"""

from typing import Iterable, Optional

from signataire.domain.entities.wallet import Wallet
from signataire.domain.value_objects.chain_type import ChainType


def resolve_active_wallet(
    known_wallets: Iterable[Wallet],
    recently_created: Optional[Wallet],
    target_chain: ChainType,
) -> Optional[Wallet]:
    """
    Pick the single active wallet for a chain.

    A wallet created in this session always wins over the provider's list,
    which may not include it yet. Otherwise the first listed wallet on the
    target chain is used.

    Args:
        known_wallets: Wallets reported by the provider, in order
        recently_created: Wallet created locally in this session, if any
        target_chain: Chain to resolve for

    Returns:
        The active wallet, or None if there is none
    """
    if recently_created is not None:
        return recently_created

    for wallet in known_wallets:
        if wallet.is_chain(target_chain):
            return wallet

    return None
