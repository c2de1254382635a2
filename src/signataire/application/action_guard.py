"""
Action guard - one wallet action at a time.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from signataire.domain.exceptions.base import OperationInProgressError


class ActionGuard:
    """
    Busy flag shared by wallet provisioning and signing.

    Actions run on a single event loop, so checking and setting the flag
    happen without a suspension point in between.
    """

    def __init__(self):
        self._running: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self._running is not None

    @property
    def running(self) -> Optional[str]:
        """Name of the action in flight, if any."""
        return self._running

    @asynccontextmanager
    async def hold(self, operation: str) -> AsyncIterator[None]:
        """
        Mark an action as running for the duration of the block.

        Args:
            operation: Action name

        Raises:
            OperationInProgressError: If another action is running
        """
        if self._running is not None:
            raise OperationInProgressError(operation, self._running)

        self._running = operation
        try:
            yield
        finally:
            self._running = None
