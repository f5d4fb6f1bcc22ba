from __future__ import annotations

from typing import Any, ClassVar, Optional

from .enums import EndpointSecurity, OutcomeKind


class BinanceError(Exception):
    """Base error for binance_rest."""

    kind: ClassVar[OutcomeKind]
    name: ClassVar[str] = "BinanceError"

    def __init__(self, message: str = "", *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self._message = message
        self._context = dict(context or {})

    @property
    def message(self) -> str:
        return self._message

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def __str__(self) -> str:
        return f"{self.name}: {self._message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"


class MissingCredentialsError(BinanceError):
    """A credential required by the endpoint's security tier is not configured."""

    kind = OutcomeKind.MISSING_CREDENTIALS
    name = "BinanceMissingCredentialsError"

    def __init__(self, security: EndpointSecurity, field: str) -> None:
        super().__init__(
            f"{security.value} HTTP endpoints require opts.{field} to be provided",
            context={"security": security.value, "field": field},
        )
        self._security = security
        self._field = field

    @property
    def security(self) -> EndpointSecurity:
        return self._security

    @property
    def field(self) -> str:
        return self._field


class HttpError(BinanceError):
    """No usable HTTP response was obtained (timeout, connection failure, ...)."""

    kind = OutcomeKind.HTTP
    name = "BinanceHttpError"

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message, context={"cause": repr(cause)} if cause is not None else None)
        self._cause = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause


class ResponseError(BinanceError):
    """The exchange answered with an error status."""

    description: ClassVar[str] = "Binance returned an error"

    def __init__(self, response: Any, status_text: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(
            f'{self.description}. Status code {status_code}. Status text "{status_text}"',
            context={"status_code": status_code, "status_text": status_text},
        )
        self._response = response
        self._status_text = status_text
        self._status_code = status_code

    @property
    def response(self) -> Any:
        return self._response

    @property
    def status_text(self) -> Optional[str]:
        return self._status_text

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code


class MalformedRequestError(ResponseError):
    """HTTP 4xx: the exchange rejected the request."""

    kind = OutcomeKind.MALFORMED_REQUEST
    name = "BinanceMalformedRequestError"
    description = "Binance rejected request for formatting reasons"


class RequestResultUnknownError(ResponseError):
    """HTTP 504: the request reached the exchange but its effect is unknown.

    Callers must treat this as an unknown outcome. An order may or may not
    have been placed; query the exchange before acting on it.
    """

    kind = OutcomeKind.REQUEST_RESULT_UNKNOWN
    name = "BinanceRequestResultUnknownError"
    description = "Binance could not determine request result"


class InternalRequestError(ResponseError):
    """HTTP 5xx other than 504."""

    kind = OutcomeKind.INTERNAL_REQUEST
    name = "BinanceInternalRequestError"
    description = "Binance encountered error in processing request"
