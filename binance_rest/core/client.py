from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, cast

from ..config import API_BASE_URL, ClientOptions, merge_transport_options
from ..net.http import RequestsTransport
from ..net.observers import LoggingObserver
from .dispatcher import Dispatcher, now_ms
from .endpoints import ENDPOINTS
from .interface import HttpTransport, RequestObserver
from .schemas import (
    Account,
    AccountParams,
    AllOrdersParams,
    Credentials,
    Endpoint,
    NewOrder,
    NewOrderParams,
    OpenOrdersParams,
    Order,
    OrderBook,
    Outcome,
    Params,
    ServerTime,
    Success,
    Ticker,
    order_book_from_raw,
)


class RestClient:
    """Facade over the Binance REST API.

    Every endpoint method is a thin call into the dispatcher and raises the
    ``binance_rest.core.errors`` error for any non-success outcome. A
    ``RequestResultUnknownError`` means the exchange may or may not have
    acted on the request.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        transport_overrides: Optional[Mapping[str, Any]] = None,
        *,
        base_url: str = API_BASE_URL,
        transport: Optional[HttpTransport] = None,
        observer: Optional[RequestObserver] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.credentials = Credentials(api_key=api_key, api_secret=api_secret)
        self.transport_options = merge_transport_options(transport_overrides)
        if transport is None:
            transport = RequestsTransport(self.transport_options)
        if observer is None:
            observer = LoggingObserver()
        self.dispatcher = Dispatcher(
            transport,
            self.credentials,
            base_url=base_url,
            observer=observer,
            clock=clock,
        )

    # --- Construction helpers ---
    @classmethod
    def from_options(cls, options: ClientOptions, **kwargs: Any) -> "RestClient":
        return cls(
            api_key=options.api_key,
            api_secret=options.api_secret,
            transport_overrides=options.transport_overrides,
            base_url=options.base_url,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RestClient":
        return cls.from_options(ClientOptions.from_env(), **kwargs)

    # --- Dispatch ---
    def dispatch(
        self,
        endpoint: Endpoint,
        params: Optional[Params] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Outcome:
        return self.dispatcher.dispatch(endpoint, params, headers=headers, timeout=timeout)

    def request(
        self,
        endpoint: Endpoint,
        params: Optional[Params] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Success:
        return self.dispatcher.request(endpoint, params, headers=headers, timeout=timeout)

    # --- Market data ---
    def ping_server(self) -> dict:
        """GET /api/v1/ping. Returns successfully if the exchange is reachable."""

        return self.request(ENDPOINTS["PING"]).body or {}

    def get_server_time(self) -> ServerTime:
        """GET /api/v1/time"""

        return cast(ServerTime, self.request(ENDPOINTS["TIME"]).body)

    def get_all_prices(self) -> List[Ticker]:
        """GET /api/v1/ticker/allPrices. Latest price for every symbol."""

        return cast(List[Ticker], self.request(ENDPOINTS["ALL_PRICES"]).body)

    def get_order_book(self, symbol: str, limit: Optional[int] = None) -> OrderBook:
        """GET /api/v1/depth

        Returns a friendlier version of the exchange response::

            {
                "lastUpdateId": int,
                "bids": [{"price": str, "quantity": str}, ...],
                "asks": [{"price": str, "quantity": str}, ...],
            }
        """

        ret = self.request(ENDPOINTS["ORDER_BOOK"], {"symbol": symbol, "limit": limit})
        return order_book_from_raw(ret.body)

    # --- Orders ---
    def order(self, params: NewOrderParams | Mapping[str, Any]) -> NewOrder:
        """POST /api/v3/order (signed). Place a new order."""

        return cast(NewOrder, self.request(ENDPOINTS["ORDER"], params).body)

    def get_open_orders(self, params: OpenOrdersParams | Mapping[str, Any]) -> List[Order]:
        """GET /api/v3/openOrders (signed)"""

        return cast(List[Order], self.request(ENDPOINTS["OPEN_ORDERS"], params).body)

    def get_all_account_orders(self, params: AllOrdersParams | Mapping[str, Any]) -> List[Order]:
        """GET /api/v3/allOrders (signed). All account orders; active, canceled, or filled."""

        return cast(List[Order], self.request(ENDPOINTS["ALL_ORDERS"], params).body)

    # --- Account ---
    def get_account_information(self, params: Optional[AccountParams | Mapping[str, Any]] = None) -> Account:
        """GET /api/v3/account (signed)"""

        return cast(Account, self.request(ENDPOINTS["ACCOUNT"], params).body)
