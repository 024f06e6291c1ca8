"""One-time passcode delivery and checking via Twilio Verify."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client

from app.core.config import Settings
from app.core.errors import ConfigurationError, VerificationError
from app.core.logging import get_logger, mask_phone
from app.domain.phone import to_e164


_logger = get_logger(__name__)

# Twilio error code -> (HTTP status, customer-facing message)
_SEND_ERRORS: dict[int, tuple[int, str]] = {
    20003: (400, "Invalid phone number format"),
    20404: (400, "The phone number is not valid"),
    60200: (400, "Invalid phone number"),
}
_CHECK_ERRORS: dict[int, tuple[int, str]] = {
    20404: (400, "Verification code has expired or is invalid"),
    60202: (429, "Maximum number of verification attempts reached"),
    60203: (400, "Invalid verification code"),
}


@dataclass(slots=True)
class VerificationStarted:
    sid: str
    status: str


@dataclass(slots=True)
class VerificationChecked:
    status: str

    @property
    def valid(self) -> bool:
        return self.status == "approved"


class VerificationService:
    def __init__(
        self,
        account_sid: str | None,
        auth_token: str | None,
        verify_sid: str | None,
        *,
        client: Any | None = None,
    ) -> None:
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._verify_sid = verify_sid
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "VerificationService":
        return cls(
            settings.twilio_account_sid,
            settings.twilio_auth_token_value(),
            settings.twilio_verify_sid,
        )

    async def send(self, phone_number: str) -> VerificationStarted:
        service = self._service()
        phone = to_e164(phone_number)
        _logger.info("Sending verification code", phone=mask_phone(phone))

        try:
            verification = await asyncio.to_thread(
                service.verifications.create, to=phone, channel="sms"
            )
        except TwilioRestException as exc:
            raise self._translate(
                exc, _SEND_ERRORS, "Failed to send verification code", phone
            ) from exc
        except Exception as exc:  # pragma: no cover - transport failures
            _logger.error(
                "Verification send failed", phone=mask_phone(phone), error=str(exc)
            )
            raise VerificationError("Failed to send verification code") from exc

        return VerificationStarted(sid=verification.sid, status=verification.status)

    async def check(self, phone_number: str, code: str) -> VerificationChecked:
        service = self._service()
        phone = to_e164(phone_number)
        _logger.info("Checking verification code", phone=mask_phone(phone))

        try:
            verification_check = await asyncio.to_thread(
                service.verification_checks.create, to=phone, code=code
            )
        except TwilioRestException as exc:
            raise self._translate(
                exc, _CHECK_ERRORS, "Failed to verify code", phone
            ) from exc
        except Exception as exc:  # pragma: no cover - transport failures
            _logger.error(
                "Verification check failed", phone=mask_phone(phone), error=str(exc)
            )
            raise VerificationError("Failed to verify code") from exc

        result = VerificationChecked(status=verification_check.status)
        _logger.info(
            "Verification code checked",
            phone=mask_phone(phone),
            status=result.status,
            valid=result.valid,
        )
        return result

    def _service(self) -> Any:
        if not (self._account_sid and self._auth_token and self._verify_sid):
            _logger.error("Missing Twilio credentials")
            raise ConfigurationError("Twilio Verify credentials not configured")
        if self._client is None:
            self._client = Client(self._account_sid, self._auth_token)
        return self._client.verify.v2.services(self._verify_sid)

    @staticmethod
    def _translate(
        exc: TwilioRestException,
        known: dict[int, tuple[int, str]],
        fallback: str,
        phone: str,
    ) -> VerificationError:
        _logger.warning(
            "Twilio verification error",
            phone=mask_phone(phone),
            code=exc.code,
            status=exc.status,
            error=exc.msg,
        )
        status_code, message = known.get(exc.code, (500, fallback))
        return VerificationError(
            message, status_code=status_code, provider_code=exc.code
        )
