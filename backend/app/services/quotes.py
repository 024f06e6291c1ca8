from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

from app.core.errors import InvalidQuoteError
from app.core.logging import get_logger, mask_phone
from app.domain.phone import is_valid_uk_phone, to_e164
from app.domain.questions import QUESTIONS, validate_answers
from app.schemas.quotes import AnsweredQuestion, QuoteRequestRecord, QuoteSubmission


_logger = get_logger(__name__)


class QuoteService:
    """Assemble a quote request record for human review.

    Nothing is priced or stored here; the record is logged and handed back.
    """

    def __init__(
        self,
        *,
        otp_required: bool = False,
        phone_validation: bool = True,
        clock: Callable[[], datetime] | None = None,
        reference_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._otp_required = otp_required
        self._phone_validation = phone_validation
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._reference_factory = reference_factory

    def submit(self, submission: QuoteSubmission) -> QuoteRequestRecord:
        problems = list(validate_answers(submission.answers).problems)

        contact = submission.contact
        if self._phone_validation and not is_valid_uk_phone(contact.phone):
            problems.append("Please enter a valid UK phone number")
        if self._otp_required and not submission.phone_verified:
            problems.append("Phone number has not been verified")

        if problems:
            _logger.info("Quote submission rejected", problems=problems)
            raise InvalidQuoteError(problems)

        answered: list[AnsweredQuestion] = []
        for question in QUESTIONS:
            value = submission.answers[question.id]
            option = question.option(value)
            answered.append(
                AnsweredQuestion(
                    question_id=question.id,
                    question=question.question,
                    value=value,
                    label=option.label if option else value,
                )
            )

        record = QuoteRequestRecord(
            reference=self._reference_factory(),
            submitted_at=self._clock(),
            answers=answered,
            address=submission.address,
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            phone=to_e164(contact.phone),
            phone_verified=submission.phone_verified,
        )

        _logger.info(
            "Quote request received",
            reference=str(record.reference),
            postcode=record.address.postcode,
            phone=mask_phone(record.phone),
            phone_verified=record.phone_verified,
        )
        return record
