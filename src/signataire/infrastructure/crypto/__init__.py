from signataire.infrastructure.crypto.stellar_verifier import (
    StellarSignatureVerifier,
    decode_public_key,
)

__all__ = ["StellarSignatureVerifier", "decode_public_key"]
