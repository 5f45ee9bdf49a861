"""Gateway configuration loaded from the environment or a .env file."""

from pathlib import Path

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    LOG_LEVEL: str = "INFO"

    # --- Payments / Stripe ---
    STRIPE_SECRET_KEY: str = ""
    STRIPE_API_URL: str = "https://api.stripe.com/v1/charges"
    # Tokenized test card accepted by Stripe in place of raw card data
    STRIPE_SOURCE_TOKEN: str = "tok_visa"
    STRIPE_TIMEOUT_SECONDS: float = Field(default=30.0, description="Upper bound for a single charge request.")

    @field_validator("STRIPE_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("STRIPE_TIMEOUT_SECONDS must be positive.")
        return value

    @field_validator("STRIPE_SOURCE_TOKEN")
    @classmethod
    def validate_source_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("STRIPE_SOURCE_TOKEN cannot be blank.")
        return value.strip()

    @field_validator("STRIPE_API_URL")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        value = value.strip()
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"STRIPE_API_URL is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("STRIPE_API_URL must be an absolute http(s) URL.")
        return value


settings = Settings()
