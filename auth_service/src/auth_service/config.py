from enum import Enum
from typing import List, Optional

from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError
from shared.security import ServiceTokenConfig


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Configuration settings for the Auth Service.

    Loads from a .env file and environment variables.

    Service settings are prefixed with AUTH_SERVICE_; the signing secret
    and internal key are shared by every service and stay unprefixed.
    """

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- GENERAL APP SETTINGS ---
    PROJECT_NAME: str = "Apogee Auth Service"
    DEBUG: bool = Field(False, alias="AUTH_SERVICE_DEBUG")
    ENVIRONMENT: Environment = Field(
        Environment.DEVELOPMENT, alias="AUTH_SERVICE_ENVIRONMENT"
    )
    LOGGING_LEVEL: str = Field("INFO", alias="AUTH_SERVICE_LOGGING_LEVEL")
    ROOT_PATH: str = Field("", alias="AUTH_SERVICE_ROOT_PATH")

    # --- DATABASE SETTINGS ---
    DATABASE_URL: str = Field(..., alias="AUTH_SERVICE_DATABASE_URL")

    # --- CORS SETTINGS ---
    CORS_ALLOW_ORIGINS: List[str] = Field(
        ["*"], alias="AUTH_SERVICE_CORS_ALLOW_ORIGINS"
    )

    # --- JWT & TOKEN SETTINGS ---
    # Must match the value every downstream service verifies with
    JWT_SECRET: Optional[str] = Field(None, alias="JWT_SECRET")
    JWT_ALGORITHM: str = Field("HS256", alias="AUTH_SERVICE_JWT_ALGORITHM")
    SESSION_SECRET: Optional[str] = Field(None, alias="AUTH_SERVICE_SESSION_SECRET")
    SESSION_TOKEN_EXPIRE_MINUTES: int = Field(
        60 * 8, alias="AUTH_SERVICE_SESSION_TOKEN_EXPIRE_MINUTES"
    )

    # --- RATE LIMITING SETTINGS ---
    RATE_LIMIT_LOGIN: str = Field("5/minute", alias="AUTH_SERVICE_RATE_LIMIT_LOGIN")
    RATE_LIMIT_SERVICE_TOKEN: str = Field(
        "30/minute", alias="AUTH_SERVICE_RATE_LIMIT_SERVICE_TOKEN"
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        return self.ENVIRONMENT == Environment.TESTING

    def expose_error_details(self) -> bool:
        return not self.is_production()

    def service_token_config(self) -> ServiceTokenConfig:
        return ServiceTokenConfig(secret=self.JWT_SECRET, algorithm=self.JWT_ALGORITHM)

    def session_secret(self) -> str:
        """Session tokens use their own secret when one is set, else JWT_SECRET."""
        secret = self.SESSION_SECRET or self.JWT_SECRET
        if not secret:
            raise ConfigurationError("No session signing secret is configured")
        return secret

    @field_validator("DATABASE_URL", mode="after")
    def validate_db_url(cls, v: PostgresDsn) -> str:
        """Ensures the database URL uses the psycopg driver."""
        return str(v).replace("postgresql://", "postgresql+psycopg://")


# Global instance of the settings
settings = Settings()
