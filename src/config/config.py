"""Configuration management for the application."""
from pydantic_settings import BaseSettings
from typing import Literal
from pydantic import ConfigDict, field_validator


class Settings(BaseSettings):
    """Application settings."""
    # Object controller settings
    OBJECT_CONTROLLER_URL: str = "http://127.0.0.1:60001/object/v3"
    OBJECT_CONTROLLER_TIMEOUT: float = 10.0

    # Logging: console level, optional per-run log file
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE_ENABLED: bool = False
    LOG_FILE_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"
    LOG_DIR: str = "logs"

    # Request defaults when the caller sends no scoping headers
    DEFAULT_LANGUAGE: Literal["en", "zh-cn"] = "en"
    DEFAULT_SUPPLIER_ACCOUNT: str = "0"

    @field_validator("OBJECT_CONTROLLER_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: float):
        """Validate the object controller timeout is positive."""
        if v <= 0:
            raise ValueError("OBJECT_CONTROLLER_TIMEOUT must be greater than zero")
        return v

    @field_validator("OBJECT_CONTROLLER_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str):
        """Normalize the base URL so endpoint paths join cleanly."""
        return v.rstrip("/")

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

settings = Settings()
