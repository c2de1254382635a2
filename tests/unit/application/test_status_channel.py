"""
Unit tests for StatusChannel and ActionGuard.

Usage:
    pytest tests/unit/application/test_status_channel.py
"""

import pytest

from signataire.application.action_guard import ActionGuard
from signataire.application.status_channel import StatusChannel
from signataire.domain.exceptions import ErrorKind, OperationInProgressError


class TestStatusChannel:
    """Unit tests for StatusChannel."""

    def test_initially_empty(self):
        assert StatusChannel().current == ""

    def test_publish_overwrites(self):
        """Test only the latest status is kept."""
        channel = StatusChannel()
        channel.publish("Requesting signature…")
        channel.publish("Signature: 0xab\nVerified? ✅")

        assert channel.current == "Signature: 0xab\nVerified? ✅"

    def test_listeners_notified_in_order(self):
        channel = StatusChannel()
        seen = []
        channel.subscribe(lambda s: seen.append(("a", s)))
        channel.subscribe(lambda s: seen.append(("b", s)))

        channel.publish("x")

        assert seen == [("a", "x"), ("b", "x")]

    def test_unsubscribe(self):
        channel = StatusChannel()
        seen = []
        unsubscribe = channel.subscribe(seen.append)

        channel.publish("one")
        unsubscribe()
        channel.publish("two")

        assert seen == ["one"]

    def test_is_failure(self):
        channel = StatusChannel()
        channel.publish("❌ Failed: nope")
        assert channel.is_failure

        channel.publish("✅ Wallet created\nGABC")
        assert not channel.is_failure


class TestActionGuard:
    """Unit tests for ActionGuard."""

    async def test_hold_marks_busy(self):
        guard = ActionGuard()

        async with guard.hold("sign"):
            assert guard.busy
            assert guard.running == "sign"

        assert not guard.busy

    async def test_second_hold_rejected(self):
        """Test a nested action raises OperationInProgressError."""
        guard = ActionGuard()

        async with guard.hold("create_wallet"):
            with pytest.raises(OperationInProgressError) as exc_info:
                async with guard.hold("sign"):
                    pass

        assert exc_info.value.kind is ErrorKind.OPERATION_IN_PROGRESS
        assert exc_info.value.running == "create_wallet"
        assert not guard.busy

    async def test_released_on_error(self):
        guard = ActionGuard()

        with pytest.raises(RuntimeError):
            async with guard.hold("sign"):
                raise RuntimeError("boom")

        assert not guard.busy
