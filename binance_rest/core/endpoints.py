from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .enums import EndpointSecurity, HttpMethod
from .schemas import Endpoint


ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType(
    {
        "PING": Endpoint("/v1/ping"),
        "TIME": Endpoint("/v1/time"),
        "ALL_PRICES": Endpoint("/v1/ticker/allPrices"),
        "ORDER_BOOK": Endpoint("/v1/depth"),
        "ORDER": Endpoint("/v3/order", HttpMethod.POST, EndpointSecurity.SIGNED),
        "OPEN_ORDERS": Endpoint("/v3/openOrders", security=EndpointSecurity.SIGNED),
        "ALL_ORDERS": Endpoint("/v3/allOrders", security=EndpointSecurity.SIGNED),
        "ACCOUNT": Endpoint("/v3/account", security=EndpointSecurity.SIGNED),
    }
)


def get_endpoint(name: str) -> Endpoint:
    key = name.upper()
    if key not in ENDPOINTS:
        raise ValueError(f"Unknown endpoint '{name}'. Registered: {list(ENDPOINTS)}")
    return ENDPOINTS[key]
