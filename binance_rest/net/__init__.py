"""Networking helpers: requests transport, canonical encoding, logging observer."""

from .http import RequestsTransport, encode_params, join_url
from .observers import LoggingObserver

__all__ = ["RequestsTransport", "encode_params", "join_url", "LoggingObserver"]
