"""
SigningResult value object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SigningResult:
    """
    Outcome of a completed sign-and-verify action.

    Attributes:
        signature: 0x-prefixed hex signature returned by the provider
        verified: Whether the signature verified under the wallet's key
    """

    signature: str
    verified: bool

    @property
    def verified_glyph(self) -> str:
        return "✅" if self.verified else "❌"
