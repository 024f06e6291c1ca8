from __future__ import annotations

from app.core.config import PLACES_SEARCH_ENDPOINT, Settings
from app.core.logging import mask_phone
from app.services.places import PlacesClient
from app.services.verification import VerificationService


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("QUOTE_GOOGLE_PLACES_API_KEY", "  places-key ")
    monkeypatch.setenv("QUOTE_TWILIO_VERIFY_SID", "   ")
    monkeypatch.setenv("QUOTE_DEFAULT_COUNTRY_CODE", "91")
    monkeypatch.setenv("QUOTE_OTP_VERIFICATION_ENABLED", "true")

    settings = Settings()

    assert settings.google_places_api_key == "places-key"
    assert settings.twilio_verify_sid is None
    assert settings.default_country_code == "+91"
    assert settings.otp_verification_enabled is True
    assert settings.places_endpoint == PLACES_SEARCH_ENDPOINT
    assert settings.places_max_results == 20


def test_otp_auto_submit_and_company_website_are_configurable(monkeypatch):
    assert Settings().otp_auto_submit is True

    monkeypatch.setenv("QUOTE_OTP_AUTO_SUBMIT", "false")
    monkeypatch.setenv("QUOTE_COMPANY_WEBSITE", "https://boilers.example.com")

    settings = Settings()

    assert settings.otp_auto_submit is False
    assert settings.company_website == "https://boilers.example.com"


def test_services_are_built_from_settings(monkeypatch):
    monkeypatch.setenv("QUOTE_TWILIO_ACCOUNT_SID", "AC1")
    monkeypatch.setenv("QUOTE_TWILIO_AUTH_TOKEN", "secret")
    monkeypatch.setenv("QUOTE_TWILIO_VERIFY_SID", "VA1")

    settings = Settings()

    assert settings.twilio_auth_token_value() == "secret"
    assert "secret" not in repr(settings)
    assert isinstance(PlacesClient.from_settings(settings), PlacesClient)
    assert isinstance(VerificationService.from_settings(settings), VerificationService)


def test_mask_phone_keeps_last_four_digits():
    assert mask_phone("+447700900123") == "*********0123"
    assert mask_phone("123") == "123"
    assert mask_phone(None) == ""
