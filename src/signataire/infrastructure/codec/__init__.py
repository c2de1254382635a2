from signataire.infrastructure.codec.hex_codec import bytes_to_hex, hex_to_bytes

__all__ = ["bytes_to_hex", "hex_to_bytes"]
