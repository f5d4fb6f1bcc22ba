"""
binance_rest: typed client for the Binance REST API.

This package provides:
- A request dispatcher that attaches API keys and HMAC signatures per
  endpoint security tier and classifies responses into typed outcomes
  (`binance_rest.core`)
- HMAC-SHA256 request signing and env-based credentials (`binance_rest.auth`)
- A `requests` transport and a logging observer (`binance_rest.net`)
- A `RestClient` facade with one method per supported endpoint

Configuration can be read from the environment (and a `.env` file) with
`RestClient.from_env()`.
"""

from __future__ import annotations

from .config import ClientOptions
from .core.client import RestClient
from .core.dispatcher import Dispatcher
from .core.enums import EndpointSecurity, HttpMethod, OrderSide, OrderType, OutcomeKind, TimeInForce
from .core.errors import (
    BinanceError,
    HttpError,
    InternalRequestError,
    MalformedRequestError,
    MissingCredentialsError,
    RequestResultUnknownError,
)
from .core.schemas import Credentials, Endpoint, NewOrderParams, Success, unwrap

__all__ = [
    "RestClient",
    "Dispatcher",
    "ClientOptions",
    # Enums
    "EndpointSecurity",
    "HttpMethod",
    "OrderSide",
    "OrderType",
    "OutcomeKind",
    "TimeInForce",
    # Errors
    "BinanceError",
    "HttpError",
    "InternalRequestError",
    "MalformedRequestError",
    "MissingCredentialsError",
    "RequestResultUnknownError",
    # Schemas
    "Credentials",
    "Endpoint",
    "NewOrderParams",
    "Success",
    "unwrap",
]
