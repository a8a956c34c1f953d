"""Tests for client settings."""

import pytest

from police_api.config import Settings, get_settings
from police_api.services.police_client import PoliceClient


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("POLICE_API_BASE_URL", raising=False)
        monkeypatch.delenv("POLICE_API_TIMEOUT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.police_api_base_url == "https://data.police.uk/api"
        assert settings.police_api_timeout == 30.0
        assert settings.police_api_user_agent.startswith("police-api-python/")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("POLICE_API_BASE_URL", "http://localhost:8080/api")
        monkeypatch.setenv("POLICE_API_TIMEOUT", "5")
        settings = Settings(_env_file=None)
        assert settings.police_api_base_url == "http://localhost:8080/api"
        assert settings.police_api_timeout == 5.0

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestClientConfig:
    def test_trailing_slash_stripped(self):
        client = PoliceClient(base_url="http://localhost:8080/api/")
        assert client.base_url == "http://localhost:8080/api"

    def test_headers(self):
        client = PoliceClient(user_agent="my-app/1.0")
        assert client.headers["User-Agent"] == "my-app/1.0"
        assert client.headers["Accept"] == "application/json"

    def test_headers_read_only(self):
        client = PoliceClient(user_agent="my-app/1.0")
        with pytest.raises(TypeError):
            client.headers["User-Agent"] = "other/2.0"
        assert client.headers["User-Agent"] == "my-app/1.0"

    def test_no_shared_client_by_default(self):
        client = PoliceClient(timeout=3.0)
        assert client.http_client is None
        assert client.timeout == 3.0
