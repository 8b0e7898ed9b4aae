"""Tests for FRONTAPP_* environment settings."""

import pytest

from frontapp_config import DEFAULT_API_ENDPOINT, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})

        assert settings.api_key is None
        assert settings.api_endpoint == DEFAULT_API_ENDPOINT
        assert settings.timeout == 10
        assert settings.verify_ssl is True
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = load_settings({
            "FRONTAPP_API_KEY": "abc",
            "FRONTAPP_API_ENDPOINT": "https://proxy.example.com/front/",
            "FRONTAPP_TIMEOUT": "2.5",
            "FRONTAPP_LOG_LEVEL": "debug",
        })

        assert settings.api_key == "abc"
        assert settings.api_endpoint == "https://proxy.example.com/front"
        assert settings.timeout == 2.5
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["0", "false", "No", "OFF"])
    def test_verify_ssl_disabled(self, raw):
        assert load_settings({"FRONTAPP_VERIFY_SSL": raw}).verify_ssl is False

    @pytest.mark.parametrize("raw", ["1", "true", "yes", ""])
    def test_verify_ssl_enabled(self, raw):
        assert load_settings({"FRONTAPP_VERIFY_SSL": raw}).verify_ssl is True

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_bad_timeout(self, raw):
        with pytest.raises(ValueError):
            load_settings({"FRONTAPP_TIMEOUT": raw})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("FRONTAPP_API_KEY", "from-env")
        assert load_settings().api_key == "from-env"
