"""
Shared fixtures: sample exchange payloads and a recording fake transport.
"""

from typing import Any, List, Mapping, Optional, Union

import pytest

from binance_rest.core.enums import HttpMethod
from binance_rest.core.interface import HttpTransport
from binance_rest.core.schemas import TransportResponse


API_KEY = "an-api-key-should-go-here"
API_SECRET = "an-api-secret-should-go-here"
FIXED_TIMESTAMP = 1499827319559


class FakeTransport(HttpTransport):
    """Records every call and replays queued responses or exceptions."""

    def __init__(self, *responses: Union[TransportResponse, BaseException]) -> None:
        self.responses = list(responses)
        self.calls: List[dict] = []

    def reply(self, status: int = 200, body: Any = None, status_text: str = "") -> "FakeTransport":
        self.responses.append(TransportResponse(status=status, status_text=status_text, body=body))
        return self

    def send(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Optional[str] = None,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "query": query, "body": body, "timeout": timeout}
        )
        nxt = self.responses.pop(0) if self.responses else TransportResponse(200, "OK", {})
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def clock():
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def sample_error() -> dict:
    return {"code": -1121, "msg": "Invalid symbol."}


@pytest.fixture
def order_book_raw() -> dict:
    return {
        "lastUpdateId": 1027024,
        "bids": [["4.00000000", "431.00000000", []]],
        "asks": [["4.00000200", "12.00000000", []]],
    }


@pytest.fixture
def all_prices() -> list:
    return [
        {"symbol": "LTCBTC", "price": "4.00000200"},
        {"symbol": "ETHBTC", "price": "0.07946600"},
    ]


@pytest.fixture
def new_order_response() -> dict:
    return {"symbol": "LTCBTC", "orderId": 1, "clientOrderId": "myOrder1", "transactTime": 1499827319559}


@pytest.fixture
def order_list() -> list:
    return [
        {
            "symbol": "LTCBTC",
            "orderId": 1,
            "clientOrderId": "myOrder1",
            "price": "0.1",
            "origQty": "1.0",
            "executedQty": "0.0",
            "status": "NEW",
            "timeInForce": "GTC",
            "type": "LIMIT",
            "side": "BUY",
            "stopPrice": "0.0",
            "icebergQty": "0.0",
            "time": 1499827319559,
        }
    ]


@pytest.fixture
def account_info() -> dict:
    return {
        "makerCommission": 15,
        "takerCommission": 15,
        "buyerCommission": 0,
        "sellerCommission": 0,
        "canTrade": True,
        "canWithdraw": True,
        "canDeposit": True,
        "balances": [
            {"asset": "BTC", "free": "4723846.89208129", "locked": "0.00000000"},
            {"asset": "LTC", "free": "4763368.68006011", "locked": "0.00000000"},
        ],
    }
