"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "SickSquares"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Track how sick you were, one square per day."
    AUTHORS: List[str] = ["SickSquares contributors"]
    PROJECT_URL: str = "https://github.com/sicksquares/sicksquares"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Local calendar date "today" is resolved in this zone
    APP_TIMEZONE: str = "UTC"

    # Database: either a full URL or its parts
    DATABASE_URL: str = ""
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    DATABASE_SSL: bool = True

    DATABASE_POOL_SIZE: int = 20
    DATABASE_POOL_RECYCLE_SECONDS: int = 30
    DATABASE_CONNECT_TIMEOUT_SECONDS: int = 2

    AUTO_CREATE_TABLES: bool = True

    # Security (tokens are issued by the OAuth sign-in front-end)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Rate limiting
    RATE_LIMIT_MAX_REQUESTS: int = 60
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _assemble_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                                 f":{self.DATABASE_PORT}"
                                 f"/{self.DATABASE_DBNAME}")
        return self


# Global settings instance
settings = Settings()
