"""
Unit tests for server configuration.
"""

import pytest
from pydantic import ValidationError

from docs_server.models.config.server import ServerConfig


class TestServerConfig:
    """Test configuration defaults, environment and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        config = ServerConfig()

        assert config.port == 3000
        assert config.host == "0.0.0.0"
        assert config.server_name == "claude-code-docs"
        assert config.uri_scheme == "claude-code"
        assert config.resource_prefix == "claude-code://docs/"
        assert config.log_level == "INFO"

    def test_port_from_environment(self, monkeypatch):
        """Test the bare PORT variable sets the HTTP port."""
        monkeypatch.setenv("PORT", "8080")
        assert ServerConfig().port == 8080

    def test_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("DOCS_SERVER_URI_SCHEME", "acme")
        monkeypatch.setenv("DOCS_SERVER_LOG_LEVEL", "debug")
        config = ServerConfig()

        assert config.uri_scheme == "acme"
        assert config.log_level == "DEBUG"

    def test_keyword_overrides(self):
        config = ServerConfig(port=9000, host=" 127.0.0.1 ")
        assert config.port == 9000
        assert config.host == "127.0.0.1"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"port": 0},
            {"port": 70000},
            {"host": "   "},
            {"uri_scheme": "1bad"},
            {"uri_scheme": "has space"},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            ServerConfig(**overrides)
