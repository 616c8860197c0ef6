"""
Error types for kin-core.

Every failure raised by this package is a ``KinError``. The subclass names
the failure kind, ``error_code`` carries a stable string for callers that
branch on it, and ``details`` holds optional diagnostic context.

    - ``InvalidAppId``: AppId construction rejected the value.
    - ``DecodeError``: a whitelist payload or codec input was malformed.
    - ``WhitelistServiceError``: the whitelist service could not be reached
      or answered with an HTTP error.

None of these are retried inside the package.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class KinErrorCode(StrEnum):
    """Stable error codes exposed on ``KinError.error_code``."""

    INVALID_APP_ID = "INVALID_APP_ID"
    DECODE_ERROR = "DECODE_ERROR"
    WHITELIST_UNAVAILABLE = "WHITELIST_UNAVAILABLE"


class KinError(Exception):
    """Base class for kin-core errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: KinErrorCode,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details


class InvalidAppId(KinError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, error_code=KinErrorCode.INVALID_APP_ID, details=details)


class DecodeError(KinError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, error_code=KinErrorCode.DECODE_ERROR, details=details)


class WhitelistServiceError(KinError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message, error_code=KinErrorCode.WHITELIST_UNAVAILABLE, details=details
        )
