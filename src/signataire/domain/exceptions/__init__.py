"""
Domain exceptions package.
"""

# Base exceptions
from signataire.domain.exceptions.base import (
    ErrorKind,
    OperationInProgressError,
    PreconditionSkip,
    SignataireException,
)

# Codec / crypto exceptions
from signataire.domain.exceptions.crypto import AddressFormatError, DecodeError

# Provider exceptions
from signataire.domain.exceptions.provider import ProviderCallError

__all__ = [
    # Base
    "ErrorKind",
    "SignataireException",
    "PreconditionSkip",
    "OperationInProgressError",
    # Provider
    "ProviderCallError",
    # Codec / crypto
    "DecodeError",
    "AddressFormatError",
]
