"""
Application use cases.
"""

from signataire.application.use_cases.provision_wallet import ProvisionWallet
from signataire.application.use_cases.sign_and_verify import SignAndVerify

__all__ = ["ProvisionWallet", "SignAndVerify"]
