from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from ..core.interface import RequestObserver
from ..core.schemas import OutgoingRequest, TransportResponse
from ..logging import get_logger, redact
from .http import API_KEY_HEADER


def _masked(headers: Mapping[str, str]) -> Dict[str, str]:
    out = dict(headers)
    if API_KEY_HEADER in out:
        out[API_KEY_HEADER] = redact(out[API_KEY_HEADER])
    return out


class LoggingObserver(RequestObserver):
    """Logs outgoing requests and received responses.

    Query strings and bodies are not logged since signed requests carry
    the signature there.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger("binance_rest.http")

    def on_request(self, request: OutgoingRequest) -> None:
        self.logger.debug(
            "making %s request with url %s headers=%s",
            request.method.value,
            request.url,
            _masked(request.headers),
        )

    def on_response(self, request: OutgoingRequest, response: TransportResponse) -> None:
        if response.status >= 400:
            self.logger.warning(
                "received %s %s response for request to %s. response data %s",
                response.status,
                response.status_text,
                request.url,
                response.body,
            )
            return
        self.logger.debug("received %s response for request to %s", response.status, request.url)

    def on_error(self, request: OutgoingRequest, error: BaseException) -> None:
        self.logger.warning("request to %s failed: %s", request.url, error)
