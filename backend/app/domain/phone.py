from __future__ import annotations

import re


_WHITESPACE = re.compile(r"\s")
_NON_DIGIT = re.compile(r"\D")
_UK_PHONE = re.compile(r"^(\+44|0)?[1-9]\d{8,10}$")
_INDIAN_MOBILE = re.compile(r"^[6-9]\d{9}$")
_GROUP_INTERNATIONAL = re.compile(r"(\d{2})(\d{4})(\d{3})(\d{3})")
_GROUP_TRUNK = re.compile(r"(\d{1})(\d{4})(\d{3})(\d{3})")
_GROUP_LOCAL = re.compile(r"(\d{4})(\d{3})(\d{3})")

SUPPORTED_COUNTRY_CODES: tuple[tuple[str, str], ...] = (
    ("+44", "UK"),
    ("+91", "IN"),
    ("+1", "US"),
    ("+33", "FR"),
    ("+49", "DE"),
    ("+39", "IT"),
    ("+34", "ES"),
    ("+31", "NL"),
    ("+32", "BE"),
    ("+41", "CH"),
    ("+43", "AT"),
)


def to_e164(raw: str) -> str:
    """Coerce a customer-entered number to the ``+<country><number>`` form.

    Numbers without a leading ``+`` are treated as UK when they start with a
    trunk ``0`` and as Indian when they start with ``91`` or look like a bare
    ten digit mobile number.
    """

    phone = _WHITESPACE.sub("", raw)
    if phone.startswith("+"):
        return phone
    if phone.startswith("0"):
        return f"+44{phone[1:]}"
    if phone.startswith("91"):
        return f"+{phone}"
    if _INDIAN_MOBILE.match(phone):
        return f"+91{phone}"
    return f"+{phone}"


def is_valid_uk_phone(raw: str) -> bool:
    return bool(_UK_PHONE.match(_WHITESPACE.sub("", raw)))


def format_uk_phone(raw: str) -> str:
    """Group digits for display, e.g. ``07700900123`` -> ``07700 900 123``."""

    digits = _NON_DIGIT.sub("", raw)
    if len(digits) > 11:
        return raw
    if digits.startswith("44"):
        return _GROUP_INTERNATIONAL.sub(r"+\1 \2 \3 \4", digits, count=1)
    if digits.startswith("0"):
        return _GROUP_TRUNK.sub(r"\1\2 \3 \4", digits, count=1)
    return _GROUP_LOCAL.sub(r"\1 \2 \3", digits, count=1)
