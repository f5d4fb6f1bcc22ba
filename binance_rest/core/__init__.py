"""Core enums, schemas, errors, interfaces, dispatcher and client facade."""

from .enums import (
    EndpointSecurity,
    HttpMethod,
    OrderSide,
    OrderStatus,
    OrderType,
    OutcomeKind,
    SymbolType,
    TimeInForce,
)
from .errors import (
    BinanceError,
    HttpError,
    InternalRequestError,
    MalformedRequestError,
    MissingCredentialsError,
    RequestResultUnknownError,
    ResponseError,
)
from .schemas import (
    AccountParams,
    AllOrdersParams,
    Credentials,
    Endpoint,
    NewOrderParams,
    OpenOrdersParams,
    Outcome,
    OutgoingRequest,
    Success,
    TransportResponse,
    order_book_from_raw,
    unwrap,
)
from .interface import HttpTransport, RequestObserver
from .endpoints import ENDPOINTS, get_endpoint
from .dispatcher import Dispatcher, classify
from .client import RestClient

__all__ = [
    # Enums
    "EndpointSecurity",
    "HttpMethod",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "OutcomeKind",
    "SymbolType",
    "TimeInForce",
    # Errors
    "BinanceError",
    "HttpError",
    "InternalRequestError",
    "MalformedRequestError",
    "MissingCredentialsError",
    "RequestResultUnknownError",
    "ResponseError",
    # Schemas
    "AccountParams",
    "AllOrdersParams",
    "Credentials",
    "Endpoint",
    "NewOrderParams",
    "OpenOrdersParams",
    "Outcome",
    "OutgoingRequest",
    "Success",
    "TransportResponse",
    "order_book_from_raw",
    "unwrap",
    # Interface / Dispatch / Facade
    "HttpTransport",
    "RequestObserver",
    "ENDPOINTS",
    "get_endpoint",
    "Dispatcher",
    "classify",
    "RestClient",
]
