from __future__ import annotations

from ..config import getenv
from ..core.schemas import Credentials


API_KEY_VARS = ("BINANCE_API_KEY", "BINANCE_APIKEY")
API_SECRET_VARS = ("BINANCE_API_SECRET", "BINANCE_APISECRET")


def load_credentials() -> Credentials:
    """Return credentials from the first non-empty env value of each variable group."""

    return Credentials(
        api_key=getenv(API_KEY_VARS[0], None, *API_KEY_VARS[1:]),
        api_secret=getenv(API_SECRET_VARS[0], None, *API_SECRET_VARS[1:]),
    )
