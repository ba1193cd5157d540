"""Authentication factor state for a single user: OTP metadata and recovery codes."""

from authfactors.config import RecoveryCodeCfg
from authfactors.domain import OtpCode, RecoveryCode, User
from authfactors.exceptions import (
    AuthFactorsError,
    DomainError,
    InvalidEmail,
    InvalidRecoveryCode,
    RecoveryCodeFailure,
)

__all__ = [
    "AuthFactorsError",
    "DomainError",
    "InvalidEmail",
    "InvalidRecoveryCode",
    "OtpCode",
    "RecoveryCode",
    "RecoveryCodeCfg",
    "RecoveryCodeFailure",
    "User",
]
