from __future__ import annotations

from types import SimpleNamespace

import pytest
from twilio.base.exceptions import TwilioRestException

from app.core.errors import ConfigurationError, VerificationError
from app.services.verification import VerificationService


class _FakeEndpoint:
    def __init__(self, response=None, error=None):
        self.calls: list[dict] = []
        self._response = response
        self._error = error

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self._response


def _fake_client(verifications=None, checks=None):
    service = SimpleNamespace(
        verifications=verifications or _FakeEndpoint(),
        verification_checks=checks or _FakeEndpoint(),
    )
    requested: list[str] = []

    def services(sid):
        requested.append(sid)
        return service

    v2 = SimpleNamespace(services=services)
    client = SimpleNamespace(verify=SimpleNamespace(v2=v2))
    return client, requested


def _twilio_error(code, status=400):
    return TwilioRestException(
        status, "https://verify.twilio.com/v2/Services", msg="rejected", code=code
    )


@pytest.mark.asyncio
async def test_send_normalizes_phone_and_requests_sms():
    verifications = _FakeEndpoint(SimpleNamespace(sid="VE123", status="pending"))
    client, requested = _fake_client(verifications=verifications)
    service = VerificationService("AC1", "token", "VA1", client=client)

    started = await service.send("07700 900123")

    assert started.sid == "VE123"
    assert started.status == "pending"
    assert requested == ["VA1"]
    assert verifications.calls == [{"to": "+447700900123", "channel": "sms"}]


@pytest.mark.asyncio
async def test_check_reports_approved_code_as_valid():
    checks = _FakeEndpoint(SimpleNamespace(status="approved"))
    client, _ = _fake_client(checks=checks)
    service = VerificationService("AC1", "token", "VA1", client=client)

    checked = await service.check("+447700900123", "123456")

    assert checked.valid
    assert checks.calls == [{"to": "+447700900123", "code": "123456"}]


@pytest.mark.asyncio
async def test_check_reports_pending_code_as_invalid():
    checks = _FakeEndpoint(SimpleNamespace(status="pending"))
    client, _ = _fake_client(checks=checks)
    service = VerificationService("AC1", "token", "VA1", client=client)

    checked = await service.check("+447700900123", "000000")

    assert checked.status == "pending"
    assert not checked.valid


@pytest.mark.asyncio
async def test_missing_credentials_raise_configuration_error():
    verifications = _FakeEndpoint(SimpleNamespace(sid="VE1", status="pending"))
    client, _ = _fake_client(verifications=verifications)
    service = VerificationService("AC1", None, "VA1", client=client)

    with pytest.raises(ConfigurationError):
        await service.send("07700900123")

    assert verifications.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("code", "status_code", "message"),
    [
        (20003, 400, "Invalid phone number format"),
        (20404, 400, "The phone number is not valid"),
        (60200, 400, "Invalid phone number"),
        (99999, 500, "Failed to send verification code"),
    ],
)
async def test_send_errors_are_translated(code, status_code, message):
    verifications = _FakeEndpoint(error=_twilio_error(code))
    client, _ = _fake_client(verifications=verifications)
    service = VerificationService("AC1", "token", "VA1", client=client)

    with pytest.raises(VerificationError) as excinfo:
        await service.send("07700900123")

    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == message
    assert excinfo.value.provider_code == code


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("code", "status_code", "message"),
    [
        (20404, 400, "Verification code has expired or is invalid"),
        (60202, 429, "Maximum number of verification attempts reached"),
        (60203, 400, "Invalid verification code"),
        (None, 500, "Failed to verify code"),
    ],
)
async def test_check_errors_are_translated(code, status_code, message):
    checks = _FakeEndpoint(error=_twilio_error(code))
    client, _ = _fake_client(checks=checks)
    service = VerificationService("AC1", "token", "VA1", client=client)

    with pytest.raises(VerificationError) as excinfo:
        await service.check("07700900123", "123456")

    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == message
