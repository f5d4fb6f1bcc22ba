from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, TypedDict, Union

from .enums import (
    EndpointSecurity,
    HttpMethod,
    OrderSide,
    OrderType,
    OutcomeKind,
    TimeInForce,
)
from .errors import BinanceError


@dataclass(frozen=True)
class Credentials:
    api_key: Optional[str] = None
    api_secret: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class Endpoint:
    path: str
    method: Optional[HttpMethod] = None  # GET when unset
    security: EndpointSecurity = EndpointSecurity.NONE


@dataclass(frozen=True)
class Success:
    status: int
    body: Any
    status_text: str = ""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS


Outcome = Union[Success, BinanceError]


def unwrap(outcome: Outcome) -> Success:
    """Return the success value, raising the error variant."""

    if isinstance(outcome, BinanceError):
        raise outcome
    return outcome


@dataclass(frozen=True)
class OutgoingRequest:
    """Fully assembled wire request handed to the transport."""

    method: HttpMethod
    url: str
    headers: Mapping[str, str]
    query: Optional[str] = None
    body: Optional[str] = None
    timeout: Optional[float] = None


@dataclass(frozen=True)
class TransportResponse:
    status: int
    status_text: str
    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)


# --- Request parameters ---
class _Params:
    """Mixin serialising dataclass fields to the exchange's camelCase names."""

    aliases: ClassVar[Dict[str, str]] = {}

    def to_params(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            out[self.aliases.get(f.name, f.name)] = value
        return out


@dataclass
class NewOrderParams(_Params):
    symbol: str
    side: OrderSide
    type: OrderType
    time_in_force: TimeInForce
    quantity: Union[float, str]
    price: Union[float, str]
    new_client_order_id: Optional[str] = None
    stop_price: Optional[Union[float, str]] = None
    iceberg_qty: Optional[Union[float, str]] = None

    aliases: ClassVar[Dict[str, str]] = {
        "time_in_force": "timeInForce",
        "new_client_order_id": "newClientOrderId",
        "stop_price": "stopPrice",
        "iceberg_qty": "icebergQty",
    }


@dataclass
class OpenOrdersParams(_Params):
    symbol: str
    recv_window: Optional[int] = None

    aliases: ClassVar[Dict[str, str]] = {"recv_window": "recvWindow"}


@dataclass
class AllOrdersParams(_Params):
    symbol: str
    order_id: Optional[int] = None
    limit: Optional[int] = None
    recv_window: Optional[int] = None

    aliases: ClassVar[Dict[str, str]] = {"order_id": "orderId", "recv_window": "recvWindow"}


@dataclass
class AccountParams(_Params):
    recv_window: Optional[int] = None

    aliases: ClassVar[Dict[str, str]] = {"recv_window": "recvWindow"}


Params = Union[Mapping[str, Any], _Params]


def as_params(params: Optional[Params]) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, _Params):
        return params.to_params()
    return dict(params)


# --- Responses ---
class ApiErrorBody(TypedDict):
    code: int
    msg: str


class ServerTime(TypedDict):
    serverTime: int


class Ticker(TypedDict):
    symbol: str
    price: str


class Balance(TypedDict):
    asset: str
    free: str
    locked: str


class Account(TypedDict):
    makerCommission: int
    takerCommission: int
    buyerCommission: int
    sellerCommission: int
    canTrade: bool
    canWithdraw: bool
    canDeposit: bool
    balances: List[Balance]


class OrderBookEntry(TypedDict):
    price: str
    quantity: str


class OrderBook(TypedDict):
    lastUpdateId: int
    bids: List[OrderBookEntry]
    asks: List[OrderBookEntry]


class NewOrder(TypedDict):
    symbol: str
    orderId: int
    clientOrderId: str
    transactTime: int


class Order(TypedDict):
    symbol: str
    orderId: int
    clientOrderId: str
    price: str
    origQty: str
    executedQty: str
    status: str  # OrderStatus value
    timeInForce: str
    type: str
    side: str
    stopPrice: str
    icebergQty: str
    time: int


def order_book_from_raw(raw: Mapping[str, Any]) -> OrderBook:
    """Reshape ``[[price, qty], ...]`` book levels into ``{price, quantity}`` dicts.

    Entries may carry trailing elements (older API versions append an
    empty list); only the first two are kept.
    """

    def _levels(entries: Any) -> List[OrderBookEntry]:
        return [{"price": e[0], "quantity": e[1]} for e in entries or []]

    return {
        "lastUpdateId": raw["lastUpdateId"],
        "bids": _levels(raw.get("bids")),
        "asks": _levels(raw.get("asks")),
    }

