from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class EndpointSecurity(str, Enum):
    """Authentication an endpoint requires."""

    NONE = "NONE"
    API_KEY = "API-KEY"  # X-MBX-APIKEY header only
    SIGNED = "SIGNED"  # API key header plus timestamp and HMAC signature


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    HTTP = "HTTP"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    REQUEST_RESULT_UNKNOWN = "REQUEST_RESULT_UNKNOWN"
    INTERNAL_REQUEST = "INTERNAL_REQUEST"


class OrderStatus(str, Enum):
    NEW = "NEW"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    CANCELLED = "CANCELLED"
    PENDING_CANCEL = "PENDING_CANCEL"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"


class SymbolType(str, Enum):
    SPOT = "SPOT"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class TimeInForce(str, Enum):
    GTC = "GTC"  # Good till cancelled
    IOC = "IOC"  # Immediate or cancel
