"""
Codec and signature verification exceptions.
"""

from signataire.domain.exceptions.base import ErrorKind, SignataireException


class DecodeError(SignataireException):
    """Raised when a hex-prefixed string cannot be decoded into bytes."""

    kind = ErrorKind.DECODE

    def __init__(self, value: str, reason: str):
        """
        Initialize decode error.

        Args:
            value: Offending input
            reason: Why decoding failed
        """
        super().__init__(f"Cannot decode {value!r}: {reason}", code="DECODE_ERROR")
        self.value = value
        self.reason = reason


class AddressFormatError(SignataireException):
    """
    Raised when a wallet address cannot be decoded into a public key.

    Distinct from a signature that simply does not verify.
    """

    kind = ErrorKind.ADDRESS_FORMAT

    def __init__(self, address: str, reason: str = "not a valid public key"):
        super().__init__(
            f"Invalid Stellar address {address!r}: {reason}",
            code="ADDRESS_FORMAT_ERROR",
        )
        self.address = address
        self.reason = reason
