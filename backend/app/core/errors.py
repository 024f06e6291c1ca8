from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a required provider credential is not configured."""


class UpstreamError(RuntimeError):
    """Raised when a third-party provider call fails or returns a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class VerificationError(RuntimeError):
    """Raised when the SMS verification provider rejects a request.

    ``status_code`` is the HTTP status the API should answer with and the
    message is safe to show to the customer.
    """

    def __init__(
        self, message: str, *, status_code: int = 500, provider_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.provider_code = provider_code


class InvalidQuoteError(ValueError):
    """Raised when submitted quote answers or contact details fail validation."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems
