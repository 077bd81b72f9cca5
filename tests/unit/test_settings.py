"""
Unit tests for configuration loading and the client factory.
"""

import pytest

from twilio_client import Client, create_client
from twilio_client.config import ClientConfig, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    monkeypatch.chdir("/")
    for name in (
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_VIDEO_BASE_URL",
        "TWILIO_WIRELESS_BASE_URL",
        "TWILIO_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-backed settings."""

    def test_reads_prefixed_environment(self, monkeypatch):
        """TWILIO_* variables populate the matching fields."""
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC999")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "s3cr3t-value")
        monkeypatch.setenv("TWILIO_TIMEOUT_SECONDS", "5")

        settings = Settings()

        assert settings.account_sid == "AC999"
        assert settings.timeout_seconds == 5.0
        assert settings.video_base_url == "https://video.twilio.com/v1"

    def test_reports_missing_credentials(self):
        """Both credential variables are reported when unset."""
        assert Settings().validate_required_fields() == ["TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN"]


class TestClientConfig:
    """Tests for the immutable client configuration."""

    def test_rejects_non_positive_timeout(self):
        """A zero timeout is refused."""
        with pytest.raises(ValueError, match="timeout"):
            ClientConfig(account_sid="AC1", auth_token="s3cr3t-value", timeout_seconds=0)

    def test_is_immutable(self):
        """Fields can't be reassigned after construction."""
        config = ClientConfig(account_sid="AC1", auth_token="s3cr3t-value")
        with pytest.raises(AttributeError):
            config.auth_token = "other"

    def test_repr_hides_token(self):
        """The auth token never appears in a repr."""
        assert "s3cr3t-value" not in repr(ClientConfig(account_sid="AC1", auth_token="s3cr3t-value"))

    def test_from_settings_copies_every_field(self):
        """from_settings carries credentials, hosts and timeout across."""
        settings = Settings(
            account_sid="AC1",
            auth_token="s3cr3t-value",
            video_base_url="https://video.example.test/v1",
            wireless_base_url="https://wireless.example.test/v1",
            timeout_seconds=7,
        )

        config = ClientConfig.from_settings(settings)

        assert config == ClientConfig(
            account_sid="AC1",
            auth_token="s3cr3t-value",
            video_base_url="https://video.example.test/v1",
            wireless_base_url="https://wireless.example.test/v1",
            timeout_seconds=7.0,
        )

    def test_from_settings_validates(self):
        """Settings without credentials can't become a config."""
        with pytest.raises(ValueError, match="account_sid"):
            ClientConfig.from_settings(Settings())


class TestCreateClient:
    """Tests for the environment-aware factory."""

    async def test_falls_back_to_environment(self, monkeypatch):
        """Missing arguments are filled from TWILIO_* variables."""
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC999")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "s3cr3t-value")
        monkeypatch.setenv("TWILIO_VIDEO_BASE_URL", "https://video.example.test/v1")

        client = create_client()
        try:
            assert isinstance(client, Client)
            assert client.config.account_sid == "AC999"
            assert client.config.video_base_url == "https://video.example.test/v1"
        finally:
            await client.aclose()

    async def test_arguments_override_environment(self, monkeypatch):
        """Explicit credentials win while other settings still come from the environment."""
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC999")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "env-value")
        monkeypatch.setenv("TWILIO_WIRELESS_BASE_URL", "https://wireless.example.test/v1")

        client = create_client("AC1", "s3cr3t-value")
        try:
            assert client.config.account_sid == "AC1"
            assert client.config.auth_token == "s3cr3t-value"
            assert client.config.wireless_base_url == "https://wireless.example.test/v1"
        finally:
            await client.aclose()

    def test_without_credentials_fails(self):
        """No arguments and no environment means a clear error."""
        with pytest.raises(ValueError, match="TWILIO_ACCOUNT_SID"):
            create_client()
