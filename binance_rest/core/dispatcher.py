from __future__ import annotations

import time
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import urlencode

from ..auth.signer import sign
from ..config import API_BASE_URL
from ..net.http import API_KEY_HEADER, FORM_CONTENT_TYPE, encode_params, join_url
from .enums import EndpointSecurity, HttpMethod
from .errors import (
    HttpError,
    InternalRequestError,
    MalformedRequestError,
    MissingCredentialsError,
    RequestResultUnknownError,
)
from .interface import HttpTransport, RequestObserver
from .schemas import (
    Credentials,
    Endpoint,
    Outcome,
    OutgoingRequest,
    Params,
    Success,
    TransportResponse,
    as_params,
    unwrap,
)


def now_ms() -> int:
    return int(time.time() * 1000)


def classify(response: TransportResponse) -> Outcome:
    """Map a received response to exactly one outcome kind."""

    status = response.status
    if 200 <= status <= 399:
        return Success(status=status, body=response.body, status_text=response.status_text)
    if 400 <= status <= 499:
        return MalformedRequestError(response.body, response.status_text, status)
    # 504 means the request reached the exchange but its result is unknown
    if status == 504:
        return RequestResultUnknownError(response.body, response.status_text, status)
    if 500 <= status <= 599:
        return InternalRequestError(response.body, response.status_text, status)
    return HttpError(f'unexpected status code {status}. Status text "{response.status_text}"')


class Dispatcher:
    """Builds, authenticates and sends one request per endpoint call.

    Each ``dispatch`` is independent: credentials are read-only and all
    per-call state is local, so a single dispatcher may be shared between
    threads as long as its transport can be.
    """

    def __init__(
        self,
        transport: HttpTransport,
        credentials: Optional[Credentials] = None,
        *,
        base_url: str = API_BASE_URL,
        observer: Optional[RequestObserver] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.transport = transport
        self.credentials = credentials or Credentials()
        self.base_url = base_url
        self.observer = observer
        self.clock = clock

    def dispatch(
        self,
        endpoint: Endpoint,
        params: Optional[Params] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Outcome:
        """Send the request for ``endpoint`` and return its outcome.

        Errors are returned, not raised. Missing credentials are reported
        before anything is sent.
        """

        method = HttpMethod(endpoint.method or HttpMethod.GET)
        inputs: Dict[str, Any] = {k: v for k, v in as_params(params).items() if v is not None}
        req_headers: Dict[str, str] = dict(headers or {})

        security = EndpointSecurity(endpoint.security)
        if security is not EndpointSecurity.NONE:
            if not self.credentials.api_key:
                return MissingCredentialsError(security, "apikey")
            req_headers[API_KEY_HEADER] = self.credentials.api_key

        if security is EndpointSecurity.SIGNED:
            if not self.credentials.api_secret:
                return MissingCredentialsError(security, "apisecret")
            # timestamp and signature must be the last two fields
            inputs.pop("timestamp", None)
            inputs.pop("signature", None)
            inputs["timestamp"] = self.clock()
            canonical = encode_params(inputs)
            signature = sign(canonical, self.credentials.api_secret)
            encoded = f"{canonical}&{urlencode({'signature': signature})}"
        else:
            encoded = encode_params(inputs)

        query: Optional[str] = None
        body: Optional[str] = None
        if method is HttpMethod.GET:
            query = encoded or None
        else:
            body = encoded or None
            if body is not None:
                req_headers["Content-Type"] = FORM_CONTENT_TYPE

        request = OutgoingRequest(
            method=method,
            url=join_url(self.base_url, endpoint.path),
            headers=req_headers,
            query=query,
            body=body,
            timeout=timeout,
        )
        return self._send(request)

    def request(
        self,
        endpoint: Endpoint,
        params: Optional[Params] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Success:
        """Like ``dispatch`` but raises the error outcome."""

        return unwrap(self.dispatch(endpoint, params, headers=headers, timeout=timeout))

    def _send(self, request: OutgoingRequest) -> Outcome:
        if self.observer is not None:
            self.observer.on_request(request)
        try:
            response = self.transport.send(
                request.method,
                request.url,
                headers=request.headers,
                query=request.query,
                body=request.body,
                timeout=request.timeout,
            )
        except HttpError as e:
            return self._failed(request, e)
        except Exception as e:  # noqa: BLE001 - any transport failure is an HttpError
            err = HttpError(f"{request.method.value} {request.url} failed: {e}", cause=e)
            err.__cause__ = e
            return self._failed(request, err)
        if self.observer is not None:
            self.observer.on_response(request, response)
        return classify(response)

    def _failed(self, request: OutgoingRequest, error: HttpError) -> HttpError:
        if self.observer is not None:
            self.observer.on_error(request, error)
        return error
