"""Tests for connection settings."""

from dataclasses import FrozenInstanceError

import pytest

from incapsula._config import DEFAULT_BASE_URL, Config
from incapsula._exceptions import ConfigurationError


class TestConfig:
    def test_explicit(self):
        cfg = Config(api_id="foo", api_key="bar", base_url="https://example.test")
        assert cfg.api_id == "foo"
        assert cfg.base_url == "https://example.test"

    def test_default_base_url(self):
        assert Config(api_id="foo", api_key="bar").base_url == DEFAULT_BASE_URL

    def test_repr_hides_key(self):
        cfg = Config(api_id="foo", api_key="s3cret-key")
        assert "s3cret-key" not in repr(cfg)
        assert "foo" in repr(cfg)

    def test_frozen(self):
        cfg = Config(api_id="foo", api_key="bar")
        with pytest.raises(FrozenInstanceError):
            cfg.api_key = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("api_id, api_key", [("", "bar"), ("foo", ""), ("", "")])
    def test_missing_credentials(self, api_id, api_key):
        with pytest.raises(ConfigurationError, match="No API credentials"):
            Config(api_id=api_id, api_key=api_key)

    def test_empty_base_url(self):
        with pytest.raises(ConfigurationError):
            Config(api_id="foo", api_key="bar", base_url="")


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INCAPSULA_API_ID", "env-id")
        monkeypatch.setenv("INCAPSULA_API_KEY", "env-key")
        monkeypatch.setenv("INCAPSULA_BASE_URL_API", "https://env.test")
        cfg = Config.from_env()
        assert (cfg.api_id, cfg.api_key, cfg.base_url) == ("env-id", "env-key", "https://env.test")

    def test_arguments_win(self, monkeypatch):
        monkeypatch.setenv("INCAPSULA_API_ID", "env-id")
        monkeypatch.setenv("INCAPSULA_API_KEY", "env-key")
        cfg = Config.from_env(api_id="arg-id")
        assert cfg.api_id == "arg-id"
        assert cfg.api_key == "env-key"
        assert cfg.base_url == DEFAULT_BASE_URL

    def test_nothing_set(self):
        with pytest.raises(ConfigurationError):
            Config.from_env()
