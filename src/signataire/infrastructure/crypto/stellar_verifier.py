"""
Stellar signature verifier.

Implements local signature verification using Ed25519.
"""

from nacl.exceptions import BadSignatureError
from nacl.exceptions import ValueError as NaclValueError
from nacl.signing import VerifyKey
from stellar_sdk import StrKey

from signataire.domain.exceptions.crypto import AddressFormatError
from signataire.domain.services.i_signature_verifier import ISignatureVerifier
from signataire.domain.value_objects.stellar_address import StellarAddress

SIGNATURE_LENGTH = 64


def decode_public_key(address: str) -> VerifyKey:
    """
    Decode a Stellar G-address into an Ed25519 verify key.

    Args:
        address: StrKey-encoded Ed25519 public key

    Returns:
        VerifyKey for the address

    Raises:
        AddressFormatError: If the address is not a valid StrKey public key
    """
    try:
        # Shape check first, then StrKey version byte and checksum
        StellarAddress(address)
        public_key_bytes = StrKey.decode_ed25519_public_key(address)
    except (ValueError, TypeError) as e:
        raise AddressFormatError(address, str(e) or "invalid StrKey") from e

    return VerifyKey(public_key_bytes)


class StellarSignatureVerifier(ISignatureVerifier):
    """
    Stellar signature verification using Ed25519.

    Address decoding failures propagate as AddressFormatError; a signature
    that does not match (including one of the wrong length) is False.
    """

    def verify(self, address: str, message: bytes, signature: bytes) -> bool:
        """
        Verify a raw signature against a Stellar address.

        Args:
            address: Stellar account address (G...)
            message: Bytes that were signed
            signature: Raw 64-byte Ed25519 signature

        Returns:
            True if signature is valid, False otherwise

        Raises:
            AddressFormatError: If the address cannot be decoded
        """
        verify_key = decode_public_key(address)

        if len(signature) != SIGNATURE_LENGTH:
            return False

        try:
            verify_key.verify(bytes(message), bytes(signature))
            return True
        except (BadSignatureError, NaclValueError):
            return False
