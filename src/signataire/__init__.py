"""
Signataire - embedded Stellar wallet signing.

Provisions a Stellar wallet through an external wallet provider, requests
raw signatures over application hashes and verifies them locally.
"""

__version__ = "0.1.0"
