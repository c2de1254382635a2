"""
Domain services and service interfaces.
"""

from signataire.domain.services.i_auth_provider import IAuthProvider
from signataire.domain.services.i_signature_verifier import ISignatureVerifier
from signataire.domain.services.i_wallet_provider import IWalletProvider
from signataire.domain.services.wallet_resolver import resolve_active_wallet

__all__ = [
    "IAuthProvider",
    "ISignatureVerifier",
    "IWalletProvider",
    "resolve_active_wallet",
]
