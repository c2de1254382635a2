from signataire.infrastructure.provider.privy_wallet_client import PrivyWalletClient

__all__ = ["PrivyWalletClient"]
