"""
StellarAddress value object - Immutable Stellar account address.
"""

from dataclasses import dataclass

# RFC 4648 base32 alphabet used by Stellar StrKey
_STRKEY_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
_ADDRESS_LENGTH = 56


@dataclass(frozen=True)
class StellarAddress:
    """
    Value object representing a Stellar Ed25519 public key (G-account).

    Business rules:
    - Must start with 'G'
    - Exactly 56 characters of the StrKey base32 alphabet
    - Immutable once created

    Checksum validation happens when the key is decoded for verification.
    """

    address: str

    def __post_init__(self):
        """Validate address shape on creation."""
        if not self.address:
            raise ValueError("Stellar address cannot be empty")

        if len(self.address) != _ADDRESS_LENGTH:
            raise ValueError(f"Invalid Stellar address length: {len(self.address)}")

        if not self.address.startswith("G"):
            raise ValueError("Stellar account address must start with 'G'")

        if not all(c in _STRKEY_ALPHABET for c in self.address):
            raise ValueError("Stellar address contains invalid characters")

    def truncated(self) -> str:
        """Return truncated address for display (e.g., 'GABCDE...WXYZ')."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def __str__(self) -> str:
        return self.address
