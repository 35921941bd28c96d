"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


EMPTY_INPUT_MESSAGE = "No lottery numbers entered."
UPSTREAM_FAILURE_MESSAGE = "Server response error (check that the lotto check service is running)."


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class UpstreamError(AppError):
    """The scoring service could not be reached or answered unusably."""

    def __init__(self, message: str = UPSTREAM_FAILURE_MESSAGE, details: Any | None = None) -> None:
        super().__init__(code="upstream_error", message=message, status_code=502, details=details)
