from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parent.parent / ".env.local"


class Settings(BaseSettings):
    # Environment settings
    environment: str = "development"
    debug: bool = False
    LOG_LEVEL: str = "INFO"

    # Postgres settings (read-only access to teams, memberships, event types)
    DATABASE_URL: str | None = None

    # =================================================================
    # DATABASE POOL SETTINGS - Simple and configurable
    # =================================================================
    DB_POOL_MIN_SIZE: int = 2
    DB_POOL_MAX_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30.0
    DB_POOL_MAX_IDLE: float = 600.0  # 10 minutes
    DB_POOL_MAX_LIFETIME: float = 3600.0  # 1 hour

    # =================================================================
    # EVENT TYPE SETTINGS
    # =================================================================
    # Location applied to team event types created without locations
    DEFAULT_CONFERENCING_APP: str = "cal-video"
    # Conferencing apps available to every team without an installed credential
    GLOBAL_CONFERENCING_APPS: list[str] = ["cal-video"]

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def database_url(self) -> str:
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL is not configured")
        return self.DATABASE_URL

    def get_db_pool_config(self) -> dict:
        """
        Get database pool configuration.
        Adjust environment-specific settings based on self.environment.
        """
        config = {
            "min_size": self.DB_POOL_MIN_SIZE,
            "max_size": self.DB_POOL_MAX_SIZE,
            "timeout": self.DB_POOL_TIMEOUT,
            "max_idle": self.DB_POOL_MAX_IDLE,
            "max_lifetime": self.DB_POOL_MAX_LIFETIME,
        }

        if self.environment == "development":
            config.update({"min_size": 1, "max_size": 4, "timeout": 15.0})

        return config


settings = Settings()
