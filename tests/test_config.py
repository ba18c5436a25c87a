"""Tests for environment-driven settings."""

from payslip_service.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "DATABASE_URL",
            "HOST",
            "PORT",
            "DEBUG",
            "LOG_LEVEL",
            "DB_POOL_SIZE",
            "DB_MAX_OVERFLOW",
            "CORS_ORIGINS",
            "CREATE_TABLES",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("payslip_service.config.load_dotenv", lambda: None)

        settings = Settings.from_env()

        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.port == 3101
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ("*",)
        assert settings.create_tables is True

    def test_overrides(self, monkeypatch):
        monkeypatch.setattr("payslip_service.config.load_dotenv", lambda: None)
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///payslips.db")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEBUG", "TRUE")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")
        monkeypatch.setenv("CREATE_TABLES", "false")

        settings = Settings.from_env()

        assert settings.database_url == "sqlite+aiosqlite:///payslips.db"
        assert settings.port == 8080
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("http://a.example", "http://b.example")
        assert settings.create_tables is False
