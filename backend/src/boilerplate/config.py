"""Application configuration with SecretStr signing key.

Loads settings from .env file with BOILERPLATE_ prefix.
Falls back to a local SQLite file when no database URL is configured.
"""

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("debug", "info", "warning", "error")


class Settings(BaseSettings):
    """Boilerplate application settings.

    All settings are loaded from environment variables with BOILERPLATE_ prefix,
    or from a .env file in the working directory.
    """

    env: str = "dev"
    database_url: str = "sqlite:///./boilerplate.db"
    jwt_secret: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_user_claim: str = "sub"
    log_level: str = "info"
    log_json: bool = True
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": ".env",
        "env_prefix": "BOILERPLATE_",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the level name; "warn" is accepted as an alias."""
        level = value.strip().lower()
        if level == "warn":
            level = "warning"
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def get_settings() -> Settings:
    """Create and return a Settings instance.

    Raises a clear error message if .env is missing or BOILERPLATE_JWT_SECRET
    is not set.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except Exception as e:
        raise RuntimeError(
            f"Failed to load Boilerplate settings: {e}\n"
            "Ensure a .env file exists with at least BOILERPLATE_JWT_SECRET set, "
            "or set the environment variable directly."
        ) from e
