from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import get_settings
from app.core.errors import ConfigurationError, VerificationError
from app.core.logging import get_logger
from app.schemas.otp import (
    OtpSendRequest,
    OtpSendResponse,
    OtpVerifyRequest,
    OtpVerifyResponse,
)
from app.services.verification import VerificationService


router = APIRouter()
_logger = get_logger(__name__)


def get_verification_service() -> VerificationService:
    return VerificationService.from_settings(get_settings())


@router.post("/send", response_model=OtpSendResponse)
async def send_code(
    payload: OtpSendRequest,
    service: VerificationService = Depends(get_verification_service),
) -> OtpSendResponse:
    if not payload.phone_number:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Phone number is required")

    try:
        started = await service.send(payload.phone_number)
    except ConfigurationError as exc:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Server configuration error"
        ) from exc
    except VerificationError as exc:
        raise HTTPException(exc.status_code, str(exc)) from exc

    return OtpSendResponse(sid=started.sid, status=started.status)


@router.post("/verify", response_model=OtpVerifyResponse)
async def verify_code(
    payload: OtpVerifyRequest,
    service: VerificationService = Depends(get_verification_service),
) -> OtpVerifyResponse:
    if not payload.phone_number or not payload.code:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            "Phone number and verification code are required",
        )

    try:
        checked = await service.check(payload.phone_number, payload.code)
    except ConfigurationError as exc:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Server configuration error"
        ) from exc
    except VerificationError as exc:
        raise HTTPException(exc.status_code, str(exc)) from exc

    return OtpVerifyResponse(status=checked.status, valid=checked.valid)
