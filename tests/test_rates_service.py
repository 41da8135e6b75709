# tests/test_rates_service.py
"""
Rates Service Tests - Unit Tests for Default Clients and Conversion

This module contains unit tests for the default client singletons, the
free functions delegating to them and the RatesService conversion logic.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fixer.application.rates_service (default clients, latest, at, RatesService)
- fixer.config.settings (Settings for test configuration)
- unittest.mock (Mock for provider mocking)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Date utilities for historical requests
from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls

from fixer.application import rates_service
from fixer.application.rates_service import (
    EXRATES_BASE_URL,
    RatesService,
    default_client,
    exrates_client,
    reset_default_clients,
)
from fixer.adapters.providers.fixer import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from fixer.config.settings import Settings
from fixer.domain.currency import EUR, SEK, USD
from fixer.domain.models import Response


@pytest.fixture(autouse=True)
def fresh_clients():
    reset_default_clients()
    yield
    reset_default_clients()


def _settings(**values):
    return Settings(_env_file=None, **values)


class TestDefaultClient:
    def test_created_from_settings(self):
        cfg = _settings(FIXER_ACCESS_KEY="abcdef123456", FIXER_TIMEOUT_SECONDS=5)
        with patch.object(rates_service, "get_settings", return_value=cfg):
            client = default_client()

        assert client.access_key == "abcdef123456"
        assert client.timeout == 5.0
        assert client.base_url == DEFAULT_BASE_URL
        assert client.user_agent == DEFAULT_USER_AGENT

    def test_base_url_and_user_agent_from_settings(self):
        cfg = _settings(FIXER_BASE_URL="https://rates.example.com/v1", FIXER_USER_AGENT="ua/1.0")
        with patch.object(rates_service, "get_settings", return_value=cfg):
            client = default_client()

        assert client.base_url == "https://rates.example.com/v1"
        assert client.user_agent == "ua/1.0"

    def test_created_once(self):
        with patch.object(rates_service, "get_settings", return_value=_settings()):
            assert default_client() is default_client()

    def test_reset(self):
        with patch.object(rates_service, "get_settings", return_value=_settings()):
            first = default_client()
            reset_default_clients()
            assert default_client() is not first

    def test_reads_environment_on_first_use(self, monkeypatch):
        monkeypatch.setenv("FIXER_ACCESS_KEY", "abc123")
        monkeypatch.setenv("LOG_LEVEL", "warn")
        reset_default_clients()

        assert default_client().access_key == "abc123"

    def test_exrates_client(self):
        client = exrates_client()
        assert client.base_url == EXRATES_BASE_URL
        assert exrates_client() is client


class TestFreeFunctions:
    @patch("fixer.application.rates_service.default_client")
    def test_latest_delegates(self, mock_default):
        expected = Response(base=EUR)
        mock_default.return_value.latest.return_value = expected

        result = rates_service.latest({"base": "EUR"}, timeout=3)

        assert result is expected
        mock_default.return_value.latest.assert_called_once_with({"base": "EUR"}, timeout=3)

    @patch("fixer.application.rates_service.default_client")
    def test_at_delegates(self, mock_default):
        when = date(2012, 3, 28)
        rates_service.at(when, {"symbols": "USD"})

        mock_default.return_value.at.assert_called_once_with(when, {"symbols": "USD"}, timeout=None)


class TestRatesService:
    def test_init(self):
        mock_provider = Mock()
        service = RatesService(provider=mock_provider)
        assert service.provider == mock_provider

    def test_convert_latest(self):
        mock_provider = Mock()
        mock_provider.latest.return_value = Response(base=EUR, rates={"SEK": 11.5})

        service = RatesService(provider=mock_provider)
        result = service.convert(2, EUR, SEK)

        assert result == 23.0
        mock_provider.latest.assert_called_once_with({"base": "EUR"}, {"symbols": "SEK"})

    def test_convert_historical(self):
        mock_provider = Mock()
        mock_provider.at.return_value = Response(base=USD, rates={"EUR": 0.5})

        service = RatesService(provider=mock_provider)
        when = date(2012, 3, 28)
        result = service.convert(10, USD, EUR, when)

        assert result == 5.0
        mock_provider.at.assert_called_once_with(when, {"base": "USD"}, {"symbols": "EUR"})
        mock_provider.latest.assert_not_called()

    def test_same_currency(self):
        mock_provider = Mock()
        service = RatesService(provider=mock_provider)

        assert service.rate(EUR, EUR) == 1.0
        mock_provider.latest.assert_not_called()

    def test_missing_rate(self):
        mock_provider = Mock()
        mock_provider.latest.return_value = Response(base=EUR, rates={})

        service = RatesService(provider=mock_provider)
        with pytest.raises(KeyError):
            service.rate(EUR, SEK)
