from __future__ import annotations

from pydantic import BaseModel


class FeatureFlags(BaseModel):
    otp_verification_enabled: bool
    address_search_enabled: bool
    phone_validation_enabled: bool


class CompanyInfo(BaseModel):
    name: str
    email: str
    phone: str
    support_email: str
    website: str


class OtpSettings(BaseModel):
    resend_cooldown: int
    code_length: int
    auto_submit: bool
    verification_timeout: int


class CountryCode(BaseModel):
    code: str
    country: str


class ClientConfigResponse(BaseModel):
    features: FeatureFlags
    company: CompanyInfo
    otp: OtpSettings
    default_country_code: str
    supported_countries: list[CountryCode]
