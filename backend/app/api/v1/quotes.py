from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import get_settings
from app.core.errors import InvalidQuoteError
from app.domain.questions import QUESTIONS
from app.schemas.quotes import (
    QuestionListResponse,
    QuestionModel,
    QuoteRequestRecord,
    QuoteSubmission,
)
from app.services.quotes import QuoteService


router = APIRouter()


def get_quote_service() -> QuoteService:
    settings = get_settings()
    return QuoteService(
        otp_required=settings.otp_verification_enabled,
        phone_validation=settings.phone_validation_enabled,
    )


@router.get("/questions", response_model=QuestionListResponse)
async def list_questions() -> QuestionListResponse:
    return QuestionListResponse(
        questions=[QuestionModel.from_domain(question) for question in QUESTIONS]
    )


@router.post(
    "",
    response_model=QuoteRequestRecord,
    status_code=status.HTTP_201_CREATED,
)
async def submit_quote(
    payload: QuoteSubmission,
    service: QuoteService = Depends(get_quote_service),
) -> QuoteRequestRecord:
    try:
        return service.submit(payload)
    except InvalidQuoteError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, exc.problems) from exc
