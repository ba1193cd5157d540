"""ABOUTME: Custom exceptions for the authfactors domain core
ABOUTME: Defines the error taxonomy raised by user and recovery code operations"""

from enum import Enum


class RecoveryCodeFailure(Enum):
    INVALID_LENGTH = "invalid-length"
    NOT_FOUND = "not-found"
    GENERATION_FAILED = "generation-failed"


class AuthFactorsError(Exception):
    """Base exception for all our custom errors."""


class DomainError(AuthFactorsError):
    """Base exception for domain rule violations."""


class InvalidEmail(DomainError, ValueError):
    """Raised when a user is built with a malformed email address."""

    def __init__(self, email: str = "") -> None:
        super().__init__("Invalid email address")
        self.email = email


class InvalidRecoveryCode(DomainError, ValueError):
    """Raised when a recovery code is rejected.

    The ``reason`` tells apart a badly shaped code, a code that is not in the
    user's pool, and a failure while generating a fresh pool. The code value
    itself is never part of the message.
    """

    _messages = {
        RecoveryCodeFailure.INVALID_LENGTH: "Invalid recovery code length",
        RecoveryCodeFailure.NOT_FOUND: "Recovery code not found",
        RecoveryCodeFailure.GENERATION_FAILED: "Failed to generate recovery codes",
    }

    def __init__(self, reason: RecoveryCodeFailure, detail: str = "") -> None:
        message = f"Invalid recovery code: {self._messages[reason]}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.reason = reason
        self.detail = detail
