from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from .enums import HttpMethod
from .schemas import OutgoingRequest, TransportResponse


class HttpTransport(ABC):
    """Executes one HTTP exchange.

    Implementations must return a ``TransportResponse`` for every status
    code the server sends and raise ``HttpError`` only when no response was
    obtained at all.
    """

    @abstractmethod
    def send(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Optional[str] = None,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:  # pragma: no cover - abstract
        raise NotImplementedError


class RequestObserver(ABC):
    """Hook called before a request is sent and after its response arrives."""

    def on_request(self, request: OutgoingRequest) -> None:
        return None

    def on_response(self, request: OutgoingRequest, response: TransportResponse) -> None:
        return None

    def on_error(self, request: OutgoingRequest, error: BaseException) -> None:
        return None
