from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OtpSendRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field("", alias="phoneNumber")

    @field_validator("phone_number", mode="before")
    def _strip_phone(cls, value: str | None) -> str:
        return str(value or "").strip()


class OtpSendResponse(BaseModel):
    success: bool = True
    sid: str
    status: str


class OtpVerifyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field("", alias="phoneNumber")
    code: str = ""
    # Sent back by the form from the send step. Twilio checks by phone and
    # code, so it is accepted but not forwarded.
    verification_sid: str | None = Field(None, alias="verificationSid")

    @field_validator("phone_number", "code", mode="before")
    def _strip_text(cls, value: str | None) -> str:
        return str(value or "").strip()


class OtpVerifyResponse(BaseModel):
    success: bool = True
    status: str
    valid: bool
