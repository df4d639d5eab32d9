"""
Tests for environment-driven settings and the CLI parser.
"""

from unittest.mock import patch

from nip_checker.cli import build_parser
from nip_checker.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, load_settings


def test_defaults(monkeypatch):
    for name in ("WHITELIST_API_URL", "WHITELIST_TIMEOUT", "WHITELIST_USER_AGENT", "PORT"):
        monkeypatch.delenv(name, raising=False)

    with patch("nip_checker.config.load_dotenv"):
        settings = load_settings()

    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.user_agent == "NIP-Checker-MCP/1.0"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WHITELIST_API_URL", "https://wl-test.mf.gov.pl/")
    monkeypatch.setenv("WHITELIST_TIMEOUT", "2.5")
    monkeypatch.setenv("PORT", "9100")

    with patch("nip_checker.config.load_dotenv"):
        settings = load_settings()

    assert settings.api_url == "https://wl-test.mf.gov.pl"
    assert settings.timeout == 2.5
    assert settings.port == 9100


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("WHITELIST_TIMEOUT", "soon")

    with patch("nip_checker.config.load_dotenv"):
        settings = load_settings()

    assert settings.timeout == DEFAULT_TIMEOUT


def test_cli_defaults_to_stdio():
    args = build_parser().parse_args([])

    assert args.transport == "stdio"


def test_cli_http_options():
    args = build_parser().parse_args(["--transport", "http", "--port", "8123"])

    assert args.transport == "http"
    assert args.port == 8123
