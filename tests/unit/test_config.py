"""Unit tests for ClientConfig."""

import pytest
from pydantic import ValidationError

from beatsaver.config import BEATSAVER_URL, DEFAULT_RESET_AFTER, ClientConfig
from beatsaver.core import BackendKind, ConfigurationError, ExecutionModel


class TestClientConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == BEATSAVER_URL
        assert config.backend is BackendKind.AIOHTTP
        assert config.execution_model is ExecutionModel.ASYNC
        assert config.default_reset_after == DEFAULT_RESET_AFTER == 60.0
        assert config.throttle_statuses == frozenset({429})
        assert config.user_agent.startswith("beatsaver-py/")

    def test_base_url_gets_trailing_slash(self):
        config = ClientConfig(base_url="http://localhost:8080")
        assert config.base_url == "http://localhost:8080/"
        assert config.url("/api/maps/latest/0") == "http://localhost:8080/api/maps/latest/0"

    def test_rejects_non_http_base_url(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="ftp://beatsaver.com")

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_with_backend(self):
        config = ClientConfig(timeout=5).with_backend("requests")
        assert config.backend is BackendKind.REQUESTS
        assert config.execution_model is ExecutionModel.SYNC
        assert config.timeout == 5

    def test_with_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="Unknown backend"):
            ClientConfig().with_backend("curl")


class TestClientConfigFromEnv:
    """Test environment loading."""

    def test_reads_prefixed_variables(self):
        config = ClientConfig.from_env(
            {
                "BEATSAVER_BASE_URL": "https://mirror.example.com",
                "BEATSAVER_BACKEND": "httpx",
                "BEATSAVER_TIMEOUT": "12.5",
                "BEATSAVER_DEFAULT_RESET_AFTER": "30",
                "UNRELATED": "ignored",
            }
        )
        assert config.base_url == "https://mirror.example.com/"
        assert config.backend is BackendKind.HTTPX
        assert config.timeout == 12.5
        assert config.default_reset_after == 30.0

    def test_empty_values_are_ignored(self):
        config = ClientConfig.from_env({"BEATSAVER_BACKEND": ""})
        assert config.backend is BackendKind.AIOHTTP

    def test_overrides_win(self):
        config = ClientConfig.from_env({"BEATSAVER_TIMEOUT": "12"}, timeout=3)
        assert config.timeout == 3

    def test_invalid_value_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid client configuration"):
            ClientConfig.from_env({"BEATSAVER_TIMEOUT": "soon"})

    def test_uses_process_environment(self, monkeypatch):
        monkeypatch.setenv("BEATSAVER_USER_AGENT", "my-tool/1.0")
        assert ClientConfig.from_env().user_agent == "my-tool/1.0"
