"""Tests for settings loading."""

import pytest

from boilerplate.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(jwt_secret="x")
        assert settings.env == "dev"
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_user_claim == "sub"
        assert settings.is_sqlite

    def test_secret_is_masked(self):
        settings = Settings(jwt_secret="hunter2")
        assert "hunter2" not in repr(settings)
        assert settings.jwt_secret.get_secret_value() == "hunter2"

    @pytest.mark.parametrize(
        "raw, expected",
        [("DEBUG", "debug"), (" info ", "info"), ("warn", "warning"), ("Error", "error")],
    )
    def test_log_level_normalised(self, raw, expected):
        assert Settings(jwt_secret="x", log_level=raw).log_level == expected

    def test_unknown_log_level(self):
        with pytest.raises(ValueError):
            Settings(jwt_secret="x", log_level="loud")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("BOILERPLATE_DATABASE_URL", "postgresql+psycopg://app@db/app")
        settings = get_settings()
        assert settings.database_url == "postgresql+psycopg://app@db/app"
        assert not settings.is_sqlite


class TestGetSettings:
    def test_missing_secret(self, monkeypatch, tmp_path):
        monkeypatch.delenv("BOILERPLATE_JWT_SECRET", raising=False)
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="BOILERPLATE_JWT_SECRET"):
            get_settings()
