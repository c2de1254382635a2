"""
ChainType value object - supported chain tags.
"""

from enum import Enum


class ChainType(str, Enum):
    """
    Chain tag identifying which ledger a wallet belongs to.

    Only Stellar is supported; the enum is the allow-list.
    """

    STELLAR = "stellar"

    @property
    def display_name(self) -> str:
        """Human-readable chain name (e.g., 'Stellar')."""
        return self.value.capitalize()

    @classmethod
    def from_tag(cls, tag: "str | ChainType") -> "ChainType":
        """
        Build chain type from a provider tag.

        Raises:
            ValueError: If the tag names an unsupported chain
        """
        if isinstance(tag, ChainType):
            return tag
        try:
            return cls(str(tag).lower())
        except ValueError:
            raise ValueError(f"Unsupported chain type: {tag!r}") from None
