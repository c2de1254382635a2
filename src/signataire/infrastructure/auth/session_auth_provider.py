"""
Session-based authentication provider.
"""

from typing import Optional

from signataire.domain.services.i_auth_provider import IAuthProvider
from signataire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class SessionAuthProvider(IAuthProvider):
    """
    Authentication provider backed by configured app credentials.

    Ready once an application id is configured. Logging in binds the
    configured user to the session; logging out clears it.
    """

    def __init__(self, app_id: Optional[str], user_id: Optional[str] = None):
        self.app_id = app_id
        self.user_id = user_id
        self._authenticated = False

    @property
    def ready(self) -> bool:
        return bool(self.app_id)

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    async def login(self) -> None:
        """Authenticate the configured user."""
        if not self.ready:
            logger.warning("Login requested before auth provider is ready")
            return
        self._authenticated = True
        logger.info(f"User logged in: {self.user_id or 'app'}")

    async def logout(self) -> None:
        """End the session."""
        self._authenticated = False
        logger.info("User logged out")
