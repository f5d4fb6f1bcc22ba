"""
Tests for environment helpers and client configuration.
"""

import pytest

from binance_rest.auth.credentials import load_credentials
from binance_rest.config import (
    API_BASE_URL,
    TRANSPORT_DEFAULTS,
    ClientOptions,
    getenv,
    getenv_bool,
    getenv_float,
    load_env,
    merge_transport_options,
)


ENV_VARS = (
    "BINANCE_API_KEY",
    "BINANCE_APIKEY",
    "BINANCE_API_SECRET",
    "BINANCE_APISECRET",
    "BINANCE_BASE_URL",
    "BINANCE_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores vars that .env loading creates
    for var in ENV_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


class TestGetenv:
    def test_first_non_empty_alias_wins(self, clean_env):
        clean_env.setenv("BINANCE_API_KEY", "")
        clean_env.setenv("BINANCE_APIKEY", "alias")

        assert getenv("BINANCE_API_KEY", None, "BINANCE_APIKEY") == "alias"

    def test_default_when_unset(self, clean_env):
        assert getenv("BINANCE_API_KEY", "fallback") == "fallback"

    @pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("ON", True), ("0", False), ("no", False)])
    def test_bool(self, monkeypatch, value, expected):
        monkeypatch.setenv("BINANCE_FLAG", value)

        assert getenv_bool("BINANCE_FLAG") is expected

    def test_bool_default(self, monkeypatch):
        monkeypatch.delenv("BINANCE_FLAG", raising=False)

        assert getenv_bool("BINANCE_FLAG", True) is True

    def test_float(self, clean_env):
        clean_env.setenv("BINANCE_TIMEOUT", "2.5")

        assert getenv_float("BINANCE_TIMEOUT") == 2.5

    def test_invalid_float(self, clean_env):
        clean_env.setenv("BINANCE_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="BINANCE_TIMEOUT"):
            getenv_float("BINANCE_TIMEOUT")


class TestTransportOptions:
    def test_merge_returns_new_read_only_mapping(self):
        merged = merge_transport_options({"timeout": 1, "verify": False})

        assert dict(merged) == {"timeout": 1, "verify": False}
        assert dict(TRANSPORT_DEFAULTS) == {"timeout": 15.0}
        with pytest.raises(TypeError):
            merged["timeout"] = 3

    def test_merge_without_overrides(self):
        assert dict(merge_transport_options()) == {"timeout": 15.0}


class TestClientOptions:
    def test_from_env(self, clean_env):
        clean_env.setenv("BINANCE_API_KEY", "k")
        clean_env.setenv("BINANCE_APISECRET", "s")
        clean_env.setenv("BINANCE_BASE_URL", "https://testnet.binance.vision/api")

        opts = ClientOptions.from_env(dotenv=False)

        assert opts.api_key == "k"
        assert opts.api_secret == "s"
        assert opts.base_url == "https://testnet.binance.vision/api"
        assert dict(opts.transport_overrides) == {}

    def test_from_env_defaults(self, clean_env):
        opts = ClientOptions.from_env(dotenv=False)

        assert opts.api_key is None
        assert opts.base_url == API_BASE_URL
        assert opts.effective_transport_options()["timeout"] == 15.0

    def test_repr_hides_credentials(self):
        opts = ClientOptions(api_key="k-123", api_secret="s-456")

        assert "k-123" not in repr(opts)
        assert "s-456" not in repr(opts)

    def test_dotenv_file_is_loaded(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("BINANCE_API_KEY=from-file\n")

        assert load_env(str(env_file)) is True
        assert load_credentials().api_key == "from-file"

    def test_dotenv_does_not_override_environment(self, clean_env, tmp_path):
        clean_env.setenv("BINANCE_API_KEY", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("BINANCE_API_KEY=from-file\n")

        load_env(str(env_file))

        assert load_credentials().api_key == "from-env"
