"""
Authentication provider interface.
"""

from abc import ABC, abstractmethod


class IAuthProvider(ABC):
    """
    Abstract interface for the authentication/session provider.

    Wallet and signing actions are only available when the provider is
    ready and the user is authenticated.
    """

    @property
    @abstractmethod
    def ready(self) -> bool:
        """Whether the provider finished initializing."""

    @property
    @abstractmethod
    def authenticated(self) -> bool:
        """Whether a user is logged in."""

    @abstractmethod
    async def login(self) -> None:
        """Start a user session."""

    @abstractmethod
    async def logout(self) -> None:
        """End the current user session."""
