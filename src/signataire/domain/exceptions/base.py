"""
Base domain exceptions.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by signataire."""

    PROVIDER_CALL = "PROVIDER_CALL"
    DECODE = "DECODE"
    ADDRESS_FORMAT = "ADDRESS_FORMAT"
    PRECONDITION_SKIP = "PRECONDITION_SKIP"
    OPERATION_IN_PROGRESS = "OPERATION_IN_PROGRESS"


class SignataireException(Exception):
    """Base exception for all signataire domain errors."""

    kind: ErrorKind = ErrorKind.PROVIDER_CALL

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class PreconditionSkip(SignataireException):
    """
    Raised when an action is attempted without its precondition.

    Not a failure: callers treat it as a silent no-op.
    """

    kind = ErrorKind.PRECONDITION_SKIP

    def __init__(self, reason: str):
        super().__init__(reason, code="PRECONDITION_SKIP")
        self.reason = reason


class OperationInProgressError(SignataireException):
    """Raised when an action starts while another one is still running."""

    kind = ErrorKind.OPERATION_IN_PROGRESS

    def __init__(self, operation: str, running: str | None = None):
        message = f"Cannot start {operation}"
        if running:
            message += f": {running} is still in progress"
        super().__init__(message, code="OPERATION_IN_PROGRESS")
        self.operation = operation
        self.running = running
