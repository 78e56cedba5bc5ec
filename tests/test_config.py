"""
Tests for Settings and the process-wide client toggles
"""

import logging

import pytest
from pydantic import ValidationError

from enom_client.utils import config
from enom_client.utils.config import Settings, get_settings, reset_settings


def _settings(**overrides) -> Settings:
    values = {"enom_username": "reseller", "enom_password": "secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings:

    def test_defaults(self):
        settings = _settings()
        assert settings.enom_env == "TEST"
        assert settings.enom_base_url == "https://resellertest.enom.com/interface.asp"
        assert settings.enom_allow_any_tld is False
        assert settings.enom_allowed_tlds == ["com", "net", "org"]
        assert settings.log_level == "INFO"
        assert not settings.is_production()

    def test_production_url(self):
        settings = _settings(enom_env="PRODUCTION")
        assert settings.enom_base_url == "https://reseller.enom.com/interface.asp"
        assert settings.is_production()

    def test_explicit_url_wins(self):
        settings = _settings(enom_env="PRODUCTION", enom_url="http://localhost:8080/interface.asp")
        assert settings.enom_base_url == "http://localhost:8080/interface.asp"

    def test_log_level_is_uppercased(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            _settings(log_level="LOUD")

    @pytest.mark.parametrize("username", ["", "your_username_here"])
    def test_placeholder_credentials_rejected(self, username):
        with pytest.raises(ValidationError):
            _settings(enom_username=username)

    def test_allowed_tlds_are_normalized(self):
        assert _settings(enom_allowed_tlds=[" .com", "co.uk"]).enom_allowed_tlds == ["com", "co.uk"]

    def test_allowed_tlds_cannot_be_empty(self):
        with pytest.raises(ValidationError):
            _settings(enom_allowed_tlds=[])

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ENOM_USERNAME", "env-user")
        monkeypatch.setenv("ENOM_PASSWORD", "env-pass")
        monkeypatch.setenv("ENOM_ALLOWED_TLDS", '["net", "org"]')
        monkeypatch.setenv("ENOM_ALLOW_ANY_TLD", "true")

        settings = Settings(_env_file=None)
        assert settings.enom_username == "env-user"
        assert settings.enom_allowed_tlds == ["net", "org"]
        assert settings.enom_allow_any_tld is True

    def test_get_settings_is_a_singleton(self, monkeypatch):
        monkeypatch.setenv("ENOM_USERNAME", "env-user")
        monkeypatch.setenv("ENOM_PASSWORD", "env-pass")
        monkeypatch.chdir("/")

        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestProcessWideToggles:

    def test_allow_any_tld_defaults_to_false(self):
        assert config.get_allow_any_tld() is False

    def test_set_allow_any_tld(self):
        config.set_allow_any_tld(True)
        assert config.get_allow_any_tld() is True

    def test_default_logger_writes_to_stdout(self):
        logger = config.get_default_logger()
        assert logger.name == "enom_client"
        assert logger.handlers

    def test_set_default_logger(self):
        custom = logging.getLogger("custom-sink")
        config.set_default_logger(custom)
        assert config.get_default_logger() is custom

    def test_none_restores_default_logger(self):
        config.set_default_logger(logging.getLogger("custom-sink"))
        config.set_default_logger(None)
        assert config.get_default_logger().name == "enom_client"
