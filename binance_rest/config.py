from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv


API_BASE_URL = "https://api.binance.com/api"

# Read-only so no client can leak its overrides into another.
TRANSPORT_DEFAULTS: Mapping[str, Any] = MappingProxyType({"timeout": 15.0})


def load_env(path: Optional[str] = None) -> bool:
    """Load a .env file into the process environment without overriding it."""

    return load_dotenv(dotenv_path=path, override=False)


def getenv(key: str, default: Optional[str] = None, *aliases: str) -> Optional[str]:
    """Return first non-empty env var among key and aliases."""

    for k in (key, *aliases):
        v = os.getenv(k)
        if v not in (None, ""):
            return v
    return default


def getenv_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def getenv_float(key: str, default: Optional[float] = None) -> Optional[float]:
    v = os.getenv(key)
    if v in (None, ""):
        return default
    try:
        return float(v)
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {v!r}") from e


def merge_transport_options(overrides: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    """Merge overrides onto the transport defaults into a new read-only mapping."""

    merged: Dict[str, Any] = dict(TRANSPORT_DEFAULTS)
    merged.update(overrides or {})
    return MappingProxyType(merged)


@dataclass(frozen=True)
class ClientOptions:
    """Construction-time configuration for a RestClient."""

    api_key: Optional[str] = field(default=None, repr=False)
    api_secret: Optional[str] = field(default=None, repr=False)
    transport_overrides: Mapping[str, Any] = field(default_factory=dict)
    base_url: str = API_BASE_URL

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "ClientOptions":
        """Build options from BINANCE_* environment variables.

        Recognised variables:
        - BINANCE_API_KEY (alias BINANCE_APIKEY)
        - BINANCE_API_SECRET (alias BINANCE_APISECRET)
        - BINANCE_BASE_URL
        - BINANCE_TIMEOUT (seconds)
        """

        if dotenv:
            load_env()

        from .auth.credentials import load_credentials

        creds = load_credentials()
        overrides: Dict[str, Any] = {}
        timeout = getenv_float("BINANCE_TIMEOUT")
        if timeout is not None:
            overrides["timeout"] = timeout
        return cls(
            api_key=creds.api_key,
            api_secret=creds.api_secret,
            transport_overrides=overrides,
            base_url=getenv("BINANCE_BASE_URL", API_BASE_URL) or API_BASE_URL,
        )

    def effective_transport_options(self) -> Mapping[str, Any]:
        return merge_transport_options(self.transport_overrides)
