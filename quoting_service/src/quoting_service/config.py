# quoting_service/src/quoting_service/config.py
from enum import Enum
from typing import List, Optional

from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.clients import DEFAULT_TIMEOUT_SECONDS
from shared.security import ServiceTokenConfig


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Configuration settings for the Quoting Service.

    Service settings are prefixed with QUOTING_SERVICE_; the internal key,
    signing secret and sibling URLs are shared across services.
    """

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- GENERAL APP SETTINGS ---
    PROJECT_NAME: str = "Apogee Quoting Service"
    SERVICE_NAME: str = "quoting"
    DEBUG: bool = Field(False, alias="QUOTING_SERVICE_DEBUG")
    ENVIRONMENT: Environment = Field(
        Environment.DEVELOPMENT, alias="QUOTING_SERVICE_ENVIRONMENT"
    )
    LOGGING_LEVEL: str = Field("INFO", alias="QUOTING_SERVICE_LOGGING_LEVEL")
    ROOT_PATH: str = Field("", alias="QUOTING_SERVICE_ROOT_PATH")

    # --- DATABASE SETTINGS ---
    DATABASE_URL: str = Field(..., alias="QUOTING_SERVICE_DATABASE_URL")

    # --- CORS SETTINGS ---
    CORS_ALLOW_ORIGINS: List[str] = Field(
        ["*"], alias="QUOTING_SERVICE_CORS_ALLOW_ORIGINS"
    )

    # --- INTER-SERVICE SETTINGS ---
    INTERNAL_SERVICE_KEY: Optional[str] = Field(None, alias="INTERNAL_SERVICE_KEY")
    JWT_SECRET: Optional[str] = Field(None, alias="JWT_SECRET")
    BENEFIT_DESIGNER_URL: str = Field(
        "http://localhost:3003", alias="BENEFIT_DESIGNER_URL"
    )
    UPSTREAM_TIMEOUT_SECONDS: float = Field(
        DEFAULT_TIMEOUT_SECONDS, alias="QUOTING_SERVICE_UPSTREAM_TIMEOUT_SECONDS"
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
        return ServiceTokenConfig(secret=self.JWT_SECRET)

    @field_validator("DATABASE_URL", mode="after")
    def validate_db_url(cls, v: PostgresDsn) -> str:
        """Ensures the database URL uses the psycopg driver."""
        return str(v).replace("postgresql://", "postgresql+psycopg://")


# Global instance of the settings
settings = Settings()
