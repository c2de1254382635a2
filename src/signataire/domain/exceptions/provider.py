"""
Wallet provider exceptions.
"""

from typing import Optional

from signataire.domain.exceptions.base import ErrorKind, SignataireException


class ProviderCallError(SignataireException):
    """
    Raised when a wallet or auth provider call fails.

    Covers network errors, provider-side rejections, rate limits and
    malformed responses. The message is the provider's own error text.
    """

    kind = ErrorKind.PROVIDER_CALL

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        Initialize provider call error.

        Args:
            message: Error message reported by the provider
            status_code: HTTP status code, if the call reached the provider
        """
        super().__init__(message, code="PROVIDER_CALL_ERROR")
        self.status_code = status_code
