"""Classified error hierarchy for Incapsula API calls.

Every failed call raises exactly one of these. The message always carries
the raw response body (when one was received) so the string alone is enough
to diagnose the failure.
"""

from __future__ import annotations

from typing import Any


class IncapsulaError(Exception):
    """Base exception for all Incapsula client errors."""

    kind = "error"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code
        self.body = body


class ConfigurationError(IncapsulaError):
    """Credentials or base URL missing when building a client."""

    kind = "configuration"


class EncodeError(IncapsulaError):
    """Request body could not be serialized. Nothing was sent."""

    kind = "encode"

    def __init__(self, message: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


class TransportError(IncapsulaError):
    """No response received — connection, DNS, TLS, or timeout failure."""

    kind = "transport"

    def __init__(self, message: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


class StatusError(IncapsulaError):
    """HTTP status other than 200."""

    kind = "status"

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class DecodeError(IncapsulaError):
    """200 response whose body is not the expected JSON shape."""

    kind = "decode"

    def __init__(self, message: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


class SemanticError(IncapsulaError):
    """200 response with a well-formed envelope reporting failure."""

    kind = "semantic"

    def __init__(
        self, message: str, code: int, envelope_message: str, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.code = code
        self.envelope_message = envelope_message
