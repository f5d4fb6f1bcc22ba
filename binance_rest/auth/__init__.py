"""Authentication helpers (HMAC signing, credentials)."""

from .credentials import load_credentials
from .signer import sign, verify

__all__ = ["load_credentials", "sign", "verify"]
