from __future__ import annotations

from fastapi import APIRouter

from app.core.config import get_settings
from app.domain.phone import SUPPORTED_COUNTRY_CODES
from app.schemas.client_config import (
    ClientConfigResponse,
    CompanyInfo,
    CountryCode,
    FeatureFlags,
    OtpSettings,
)


router = APIRouter()


@router.get("", response_model=ClientConfigResponse)
async def get_client_config() -> ClientConfigResponse:
    """Expose the settings the quote form needs to render itself."""

    settings = get_settings()
    return ClientConfigResponse(
        features=FeatureFlags(
            otp_verification_enabled=settings.otp_verification_enabled,
            address_search_enabled=settings.address_search_enabled,
            phone_validation_enabled=settings.phone_validation_enabled,
        ),
        company=CompanyInfo(
            name=settings.company_name,
            email=settings.company_email,
            phone=settings.company_phone,
            support_email=settings.company_support_email,
            website=settings.company_website,
        ),
        otp=OtpSettings(
            resend_cooldown=settings.otp_resend_cooldown,
            code_length=settings.otp_code_length,
            auto_submit=settings.otp_auto_submit,
            verification_timeout=settings.otp_verification_timeout,
        ),
        default_country_code=settings.default_country_code,
        supported_countries=[
            CountryCode(code=code, country=country)
            for code, country in SUPPORTED_COUNTRY_CODES
        ],
    )
