"""
Tests for HMAC-SHA256 request signing.
"""

from binance_rest.auth.signer import sign, verify


# Example from the Binance REST API documentation
DOC_SECRET = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
DOC_QUERY = (
    "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1&price=0.1"
    "&recvWindow=5000&timestamp=1499827319559"
)
DOC_SIGNATURE = "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"


class TestSign:
    def test_matches_documented_signature(self):
        assert sign(DOC_QUERY, DOC_SECRET) == DOC_SIGNATURE

    def test_is_deterministic(self):
        assert sign("a=1&b=2", "secret") == sign("a=1&b=2", "secret")

    def test_lowercase_hex_sha256(self):
        digest = sign("a=1", "secret")

        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)

    def test_depends_on_secret_and_body(self):
        base = sign("a=1", "secret")

        assert sign("a=1", "other") != base
        assert sign("a=2", "secret") != base

    def test_empty_secret_still_signs(self):
        assert len(sign("a=1", "")) == 64


class TestVerify:
    def test_accepts_matching_signature(self):
        assert verify(DOC_QUERY, DOC_SECRET, DOC_SIGNATURE)
        assert verify(DOC_QUERY, DOC_SECRET, DOC_SIGNATURE.upper())

    def test_rejects_wrong_signature(self):
        assert not verify(DOC_QUERY, "wrong-secret", DOC_SIGNATURE)
