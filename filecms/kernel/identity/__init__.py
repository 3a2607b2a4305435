"""
Identity Core - Registration and authentication.
"""

from filecms.kernel.identity.credential_ledger import CredentialLedger

__all__ = [
    "CredentialLedger",
]
