from __future__ import annotations

import hashlib
import hmac


def sign(canonical_body: str, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``canonical_body`` keyed by ``secret``.

    ``canonical_body`` must be the exact urlencoded string that is sent on
    the wire; any re-encoding after signing invalidates the signature.
    """

    return hmac.new(secret.encode("utf-8"), canonical_body.encode("utf-8"), hashlib.sha256).hexdigest()


def verify(canonical_body: str, secret: str, signature: str) -> bool:
    return hmac.compare_digest(sign(canonical_body, secret), signature.lower())
