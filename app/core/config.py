"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (Twilio credentials, CORS, rate limits)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Twilio credentials are optional: without all three the SMS service
    runs in mock mode.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Twilio
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_PHONE_NUMBER: Optional[str] = Field(
        default=None,
        description="Sender phone number in international format (+1234567890)"
    )
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com",
        description="Twilio REST API base URL"
    )
    TWILIO_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Twilio request timeout in seconds"
    )

    # SMS
    SMS_BULK_DELAY_SECONDS: float = Field(
        default=1.0,
        description="Pause between bulk sends (Twilio free tier allows ~1 SMS/second)"
    )
    DEFAULT_COUNTRY_CODE: str = Field(
        default="+63",
        description="Country code used when formatting local phone numbers"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    PORT: int = Field(
        default=5000,
        description="HTTP port for uvicorn"
    )
    CORS_ORIGINS: list = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins (admin dashboard)"
    )

    @validator("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_PHONE_NUMBER")
    def blank_to_none(cls, v):
        """Treat blank credential values in .env as unset."""
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def twilio_configured(self) -> bool:
        """All three Twilio values present; anything less means mock mode."""
        return bool(
            self.TWILIO_ACCOUNT_SID
            and self.TWILIO_AUTH_TOKEN
            and self.TWILIO_PHONE_NUMBER
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    if config.SMS_BULK_DELAY_SECONDS < 0:
        errors.append("SMS_BULK_DELAY_SECONDS must not be negative")

    if config.TWILIO_TIMEOUT_SECONDS <= 0:
        errors.append("TWILIO_TIMEOUT_SECONDS must be positive")

    # Production-specific validations
    if config.is_production and not config.twilio_configured:
        errors.append(
            "TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER are required in production"
        )

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True


def describe_twilio_settings(config: Optional[Settings] = None) -> dict:
    """
    Summarizes Twilio configuration for startup logs.
    Never includes the secret values themselves.
    """
    config = config or settings
    return {
        "account_sid": "set" if config.TWILIO_ACCOUNT_SID else "missing",
        "auth_token": "set" if config.TWILIO_AUTH_TOKEN else "missing",
        "phone_number": config.TWILIO_PHONE_NUMBER or "missing",
        "mode": "live" if config.twilio_configured else "mock",
    }
