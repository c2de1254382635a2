"""
Configuration package.
"""

from signataire.config.settings import (
    EXAMPLE_HASH,
    ProviderConfig,
    SignataireConfig,
    WalletConfig,
    get_settings,
    load_config,
    reset_settings,
)

__all__ = [
    "EXAMPLE_HASH",
    "ProviderConfig",
    "SignataireConfig",
    "WalletConfig",
    "get_settings",
    "load_config",
    "reset_settings",
]
