"""
Signature verifier interface.
"""

from abc import ABC, abstractmethod


class ISignatureVerifier(ABC):
    """Abstract service interface for local signature verification."""

    @abstractmethod
    def verify(self, address: str, message: bytes, signature: bytes) -> bool:
        """
        Verify a signature against a chain-native address.

        Args:
            address: Wallet address in the chain's native encoding
            message: Signed bytes (the raw hash)
            signature: Raw signature bytes

        Returns:
            True if signature is valid for the address, False otherwise

        Raises:
            AddressFormatError: If the address cannot be decoded
        """
