"""
SigningRequest value object - one raw-sign attempt.
"""

from dataclasses import dataclass

from signataire.domain.value_objects.chain_type import ChainType


@dataclass(frozen=True)
class SigningRequest:
    """
    Raw-sign request sent to the wallet provider.

    Built fresh for every signing attempt and never persisted. The provider
    keys its signing primitive by wallet id, never by address.

    Attributes:
        chain_type: Chain the wallet belongs to
        wallet_id: Provider-assigned opaque wallet identifier
        hash: 0x-prefixed hex hash to sign
    """

    chain_type: ChainType
    wallet_id: str
    hash: str
