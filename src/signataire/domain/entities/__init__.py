"""
Domain entities.
"""

from signataire.domain.entities.wallet import Wallet

__all__ = ["Wallet"]
