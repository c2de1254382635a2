"""
Status channel - the single human-readable outcome display.
"""

from typing import Callable, List

from signataire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

StatusListener = Callable[[str], None]

# Glyphs marking terminal outcomes
SUCCESS_GLYPH = "✅"
FAILURE_GLYPH = "❌"


class StatusChannel:
    """
    Holds the latest status string and notifies listeners.

    Every publish overwrites the previous value; no history is kept.
    Listeners are called synchronously in subscription order.
    """

    def __init__(self, initial: str = ""):
        self._current = initial
        self._listeners: List[StatusListener] = []

    @property
    def current(self) -> str:
        return self._current

    def publish(self, status: str) -> None:
        """
        Replace the current status.

        Args:
            status: New status text (may span multiple lines)
        """
        self._current = status
        logger.debug(f"Status: {status!r}")
        for listener in list(self._listeners):
            listener(status)

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """
        Register a listener for status updates.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def is_failure(self) -> bool:
        """Whether the current status reports a failure."""
        return self._current.startswith(FAILURE_GLYPH)
