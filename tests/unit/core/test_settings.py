"""Tests for environment-backed settings and error formatting."""

import pytest

from cfstream.core.errors import ErrorDetail, UpstreamAPIError
from cfstream.core.settings import (
    API_ENDPOINT_DEFAULT,
    SIGNED_URL_TTL_DEFAULT,
    CloudflareSettings,
)


class TestCloudflareSettings:
    """Tests for CLOUDFLARE_* environment loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("CLIENT_ID", "CLIENT_SECRET", "STREAM_KEY_ID", "STREAM_JWK_ID"):
            monkeypatch.delenv(f"CLOUDFLARE_{name}", raising=False)
        settings = CloudflareSettings()
        assert settings.client_id == ""
        assert settings.endpoint == API_ENDPOINT_DEFAULT
        assert settings.signed_url_ttl == SIGNED_URL_TTL_DEFAULT

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDFLARE_CLIENT_ID", "acc-1")
        monkeypatch.setenv("CLOUDFLARE_STREAM_KEY_ID", "key-1")
        settings = CloudflareSettings()
        assert settings.client_id == "acc-1"
        assert settings.stream_key_id == "key-1"

    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDFLARE_CLIENT_ID", "from-env")
        assert CloudflareSettings(client_id="explicit").client_id == "explicit"


class TestUpstreamAPIError:
    """Tests for upstream error messages."""

    def test_message_lists_platform_errors(self) -> None:
        err = UpstreamAPIError(
            400,
            "Bad Request",
            [
                ErrorDetail(code=10011, message="Invalid meta"),
                ErrorDetail(code=10012, message="Invalid creator"),
            ],
        )
        assert str(err) == "400 Bad Request (10011: Invalid meta; 10012: Invalid creator)"

    def test_message_without_errors(self) -> None:
        err = UpstreamAPIError(503, "Service Unavailable")
        assert err.errors == []
        assert str(err) == "503 Service Unavailable"
