"""Tests for Config loading and the token secret rules."""

import pytest

from notesmate.config import DEV_TOKEN_SECRET, Config, TokenConfig
from notesmate.domain.shared.error import ConfigurationError


@pytest.fixture
def no_secret(monkeypatch):
    monkeypatch.delenv("NOTESMATE_AUTH__TOKEN__SECRET", raising=False)
    monkeypatch.delenv("NOTESMATE_CONFIG_FILE", raising=False)


class TestTokenSecret:
    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv("NOTESMATE_AUTH__TOKEN__SECRET", "from-env-from-env-from-env-12345")

        assert Config().auth.token.secret == "from-env-from-env-from-env-12345"

    def test_production_without_secret_refuses_to_start(self, monkeypatch, no_secret):
        monkeypatch.setenv("NOTESMATE_SERVER__ENVIRONMENT", "production")

        with pytest.raises(ConfigurationError) as exc_info:
            Config()

        assert exc_info.value.code == "missing_token_secret"

    def test_development_falls_back_to_placeholder(self, monkeypatch, no_secret):
        monkeypatch.setenv("NOTESMATE_SERVER__ENVIRONMENT", "development")
        monkeypatch.setenv("NOTESMATE_AUTH__TOKEN__VALIDITY_HOURS", "2")

        config = Config()

        assert config.auth.token.secret == DEV_TOKEN_SECRET
        assert config.auth.token.validity_hours == 2

    def test_production_with_secret_starts(self, monkeypatch):
        monkeypatch.setenv("NOTESMATE_SERVER__ENVIRONMENT", "production")
        monkeypatch.setenv("NOTESMATE_AUTH__TOKEN__SECRET", "prod-secret-prod-secret-prod-secret")

        config = Config()

        assert config.server.is_production
        assert config.auth.token.secret != DEV_TOKEN_SECRET


class TestYamlConfig:
    def test_yaml_file_supplies_values(self, monkeypatch, tmp_path, no_secret):
        config_file = tmp_path / "notesmate.yaml"
        config_file.write_text(
            "auth:\n"
            "  token:\n"
            "    secret: yaml-secret-yaml-secret-yaml-secret\n"
            "    validity_hours: 8\n"
            "database:\n"
            "  url: sqlite+aiosqlite:///:memory:\n"
        )
        monkeypatch.setenv("NOTESMATE_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.auth.token.secret == "yaml-secret-yaml-secret-yaml-secret"
        assert config.auth.token.validity_seconds == 8 * 3600
        assert config.database.url == "sqlite+aiosqlite:///:memory:"


class TestTokenConfig:
    def test_default_validity_is_24_hours(self):
        config = TokenConfig(secret="s")

        assert config.validity_ms == 24 * 3600 * 1000
        assert config.validity_seconds == 24 * 3600
