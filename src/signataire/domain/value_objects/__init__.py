"""
Domain value objects.
"""

from signataire.domain.value_objects.chain_type import ChainType
from signataire.domain.value_objects.signing_request import SigningRequest
from signataire.domain.value_objects.signing_result import SigningResult
from signataire.domain.value_objects.stellar_address import StellarAddress

__all__ = [
    "ChainType",
    "SigningRequest",
    "SigningResult",
    "StellarAddress",
]
