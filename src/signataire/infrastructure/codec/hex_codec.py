"""
Hex codec for hashes and signatures.

Converts between 0x-prefixed hex strings (wire format used by the wallet
provider) and raw bytes.
"""

import binascii

from signataire.domain.exceptions.crypto import DecodeError

HEX_PREFIX = "0x"


def hex_to_bytes(value: str) -> bytes:
    """
    Decode a 0x-prefixed hex string.

    Args:
        value: Hex string such as '0x6503b0...'

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If the prefix is missing, the length is odd or a
            non-hex character follows the prefix
    """
    if not isinstance(value, str) or not value[:2].lower() == HEX_PREFIX:
        raise DecodeError(value, f"missing '{HEX_PREFIX}' prefix")

    digits = value[2:]
    if len(digits) % 2:
        raise DecodeError(value, "odd number of hex digits")

    try:
        # unhexlify rejects whitespace, unlike bytes.fromhex
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(value, "non-hex character") from e


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as a lowercase 0x-prefixed hex string."""
    return HEX_PREFIX + bytes(data).hex()
