from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PLACES_SEARCH_ENDPOINT = "https://places.googleapis.com/v1/places:searchText"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    debug: bool = Field(False, alias="QUOTE_DEBUG")
    cors_origins: list[str] = Field(["*"], alias="QUOTE_CORS_ORIGINS")

    google_places_api_key: str | None = Field(
        None, alias="QUOTE_GOOGLE_PLACES_API_KEY"
    )
    places_endpoint: str = Field(PLACES_SEARCH_ENDPOINT, alias="QUOTE_PLACES_ENDPOINT")
    places_timeout: float = Field(10.0, alias="QUOTE_PLACES_TIMEOUT")
    places_max_results: int = Field(20, ge=1, le=20, alias="QUOTE_PLACES_MAX_RESULTS")

    twilio_account_sid: str | None = Field(None, alias="QUOTE_TWILIO_ACCOUNT_SID")
    twilio_auth_token: SecretStr | None = Field(None, alias="QUOTE_TWILIO_AUTH_TOKEN")
    twilio_verify_sid: str | None = Field(None, alias="QUOTE_TWILIO_VERIFY_SID")

    # Feature flags
    otp_verification_enabled: bool = Field(
        False, alias="QUOTE_OTP_VERIFICATION_ENABLED"
    )
    address_search_enabled: bool = Field(True, alias="QUOTE_ADDRESS_SEARCH_ENABLED")
    phone_validation_enabled: bool = Field(
        True, alias="QUOTE_PHONE_VALIDATION_ENABLED"
    )

    otp_resend_cooldown: int = Field(60, ge=0, alias="QUOTE_OTP_RESEND_COOLDOWN")
    otp_code_length: int = Field(6, ge=4, le=10, alias="QUOTE_OTP_CODE_LENGTH")
    otp_auto_submit: bool = Field(True, alias="QUOTE_OTP_AUTO_SUBMIT")
    otp_verification_timeout: int = Field(
        300, ge=0, alias="QUOTE_OTP_VERIFICATION_TIMEOUT"
    )

    default_country_code: str = Field("+44", alias="QUOTE_DEFAULT_COUNTRY_CODE")

    # Company contact block shown on the form
    company_name: str = Field("Origin", alias="QUOTE_COMPANY_NAME")
    company_email: str = Field("hello@origin.com", alias="QUOTE_COMPANY_EMAIL")
    company_phone: str = Field("0330 113 1333", alias="QUOTE_COMPANY_PHONE")
    company_support_email: str = Field(
        "support@origin.com", alias="QUOTE_COMPANY_SUPPORT_EMAIL"
    )
    company_website: str = Field("https://origin.com", alias="QUOTE_COMPANY_WEBSITE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator(
        "google_places_api_key",
        "twilio_account_sid",
        "twilio_verify_sid",
        mode="before",
    )
    def _blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("default_country_code", mode="before")
    def _normalize_country_code(cls, value: str) -> str:
        if isinstance(value, str):
            cleaned = value.strip()
            if cleaned and not cleaned.startswith("+"):
                cleaned = f"+{cleaned}"
            return cleaned
        return value

    def twilio_auth_token_value(self) -> str | None:
        if self.twilio_auth_token is None:
            return None
        return self.twilio_auth_token.get_secret_value().strip() or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
