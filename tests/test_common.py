"""Tests for common utilities and configuration."""

import io
import json
import logging

from shortify_client.config import Config, load_config
from shortify_client.lib.common.validators import (
    is_valid_url,
    is_valid_short_code,
    normalize_short_code,
)
from shortify_client.lib.common.url_builder import (
    build_api_url,
    qr_code_path,
    url_stats_path,
)
from shortify_client.lib.common.logging_config import setup_logging


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid

        valid, _ = is_valid_url("http://example.com/path")
        assert valid

        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("   ")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("not-a-url")
        assert not valid

        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()

        valid, error = is_valid_url("https://")
        assert not valid
        assert "domain" in error.lower()

    def test_url_too_long(self):
        valid, error = is_valid_url("https://example.com/" + "a" * 2048)
        assert not valid
        assert "too long" in error

    def test_short_codes(self):
        """Test short code validation."""
        assert is_valid_short_code("t6fXRb") == (True, "")

        valid, error = is_valid_short_code("   ")
        assert not valid
        assert error == "Please enter a short code"

        valid, _ = is_valid_short_code("")
        assert not valid

    def test_normalize_short_code(self):
        assert normalize_short_code("  t6fXRb \n") == "t6fXRb"
        assert normalize_short_code("http://localhost:8080/abc123") == "abc123"
        assert normalize_short_code("http://localhost:8080/abc123/") == "abc123"
        assert normalize_short_code("   ") == ""


class TestURLBuilder:
    """Test backend URL building."""

    def test_url_stats_path(self):
        assert url_stats_path("t6fXRb") == "/api/v1/stats/url/t6fXRb"

    def test_url_stats_path_is_escaped(self):
        assert url_stats_path("a/b?c") == "/api/v1/stats/url/a%2Fb%3Fc"

    def test_qr_code_path(self):
        path = qr_code_path("http://localhost:8080/abc123")
        assert path == "/api/v1/create/qr?shortUrl=http%3A%2F%2Flocalhost%3A8080%2Fabc123"

    def test_build_api_url(self):
        assert build_api_url("http://localhost:8080/", "/api/v1/stats/platform") == (
            "http://localhost:8080/api/v1/stats/platform"
        )


class TestConfig:
    """Test configuration loading."""

    def test_redirect_base_url_defaults_to_api_origin(self):
        config = Config(api_base_url="http://gateway.local:8080/")
        assert config.api_base_url == "http://gateway.local:8080"
        assert config.redirect_base_url == "http://gateway.local:8080"

    def test_explicit_redirect_base_url(self):
        config = Config(api_base_url="http://gateway.local", redirect_base_url="https://sho.rt")
        assert config.redirect_base_url == "https://sho.rt"

    def test_no_timeout_by_default(self):
        assert Config().request_timeout_seconds is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://from-env:9000")
        monkeypatch.setenv("PORT", "4000")
        config = load_config()
        assert config.api_base_url == "http://from-env:9000"
        assert config.port == 4000

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://from-env:9000")
        config = load_config(api_base_url="http://override:1234", port=None)
        assert config.api_base_url == "http://override:1234"


class TestLogging:
    """Test logging setup."""

    def test_setup_logging(self, tmp_path):
        log_file = tmp_path / "client.log"
        logger = setup_logging(level="warning", log_file=str(log_file))

        assert logger.name == "shortify_client"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 2

        logger.warning("backend unreachable")
        for handler in logger.handlers:
            handler.flush()
        assert "backend unreachable" in log_file.read_text()

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_json_lines_escape_quotes(self):
        stream = io.StringIO()
        logger = setup_logging(json_format=True, stream=stream)

        logger.info('shortened "https://example.com/?q=a"')

        entry = json.loads(stream.getvalue().splitlines()[-1])
        assert entry["message"] == 'shortened "https://example.com/?q=a"'
        assert entry["logger"] == "shortify_client"
        assert entry["level"] == "INFO"

    def test_httpx_request_logs_quieted(self):
        setup_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG
