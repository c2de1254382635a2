from tests.helpers.fake_wallet_provider import FakeWalletProvider, make_keypair

__all__ = ["FakeWalletProvider", "make_keypair"]
