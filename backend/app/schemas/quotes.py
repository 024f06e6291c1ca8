from __future__ import annotations

import re
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.questions import Question
from app.schemas.addresses import SelectedAddress


_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class QuestionOptionModel(BaseModel):
    value: str
    label: str
    image: str | None = None


class QuestionModel(BaseModel):
    id: str
    question: str
    hint: str | None = None
    info: str | None = None
    help_phone: str | None = None
    options: list[QuestionOptionModel]

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionModel":
        return cls(
            id=question.id,
            question=question.question,
            hint=question.hint,
            info=question.info,
            help_phone=question.help_phone,
            options=[
                QuestionOptionModel(
                    value=option.value, label=option.label, image=option.image
                )
                for option in question.options
            ],
        )


class QuestionListResponse(BaseModel):
    questions: list[QuestionModel]


class ContactDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone: str

    @field_validator("first_name", "last_name", "email", "phone", mode="before")
    def _strip(cls, value: str | None) -> str:
        return str(value or "").strip()

    @field_validator("first_name")
    def _check_first_name(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("First name must be at least 2 characters")
        return value

    @field_validator("last_name")
    def _check_last_name(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("Last name must be at least 2 characters")
        return value

    @field_validator("email")
    def _check_email(cls, value: str) -> str:
        if not _EMAIL_RE.match(value):
            raise ValueError("Please enter a valid email address")
        return value


class QuoteSubmission(BaseModel):
    answers: dict[str, str]
    address: SelectedAddress
    contact: ContactDetails
    phone_verified: bool = False


class AnsweredQuestion(BaseModel):
    question_id: str
    question: str
    value: str
    label: str


class QuoteRequestRecord(BaseModel):
    reference: UUID
    submitted_at: datetime
    answers: list[AnsweredQuestion]
    address: SelectedAddress
    first_name: str
    last_name: str
    email: str
    phone: str
    phone_verified: bool
