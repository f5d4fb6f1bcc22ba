from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from ..config import merge_transport_options
from ..core.enums import HttpMethod
from ..core.errors import HttpError
from ..core.interface import HttpTransport
from ..core.schemas import TransportResponse


API_KEY_HEADER = "X-MBX-APIKEY"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def join_url(base: str, path: str) -> str:
    """Join base and path with exactly one slash between them."""

    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def _format_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return value


def encode_params(params: Mapping[str, Any]) -> str:
    """Form-urlencode ``params`` in iteration order.

    This is the canonical body: the same string is signed and transmitted.
    """

    return urlencode([(k, _format_value(v)) for k, v in params.items()])


class RequestsTransport(HttpTransport):
    """HTTP transport on top of ``requests``.

    ``options`` are passed through to ``requests.request`` (``timeout``,
    ``proxies``, ``verify``, ``cert``, ...). A ``headers`` option is merged
    under the per-request headers. Each call goes through the module-level
    ``requests.request`` so no state is shared between concurrent calls.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        self.options: Mapping[str, Any] = merge_transport_options(options)

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
        kwargs: Dict[str, Any] = dict(self.options)
        merged_headers: Dict[str, str] = dict(kwargs.pop("headers", None) or {})
        merged_headers.update(headers)
        if timeout is not None:
            kwargs["timeout"] = timeout
        method_name = HttpMethod(method).value
        try:
            r = requests.request(
                method_name,
                url,
                params=query or None,
                data=body,
                headers=merged_headers,
                **kwargs,
            )
        except requests.RequestException as e:
            raise HttpError(f"{method_name} {url} failed: {e}", cause=e) from e
        return TransportResponse(
            status=r.status_code,
            status_text=r.reason or "",
            body=_decode_body(r),
            headers=MappingProxyType(dict(r.headers)),
        )


def _decode_body(r: "requests.Response") -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text
