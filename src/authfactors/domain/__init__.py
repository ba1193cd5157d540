"""Domain models for authfactors."""

from .otp import OtpCode
from .recovery_codes import RecoveryCode, generate_recovery_code
from .users import User

__all__ = ["OtpCode", "RecoveryCode", "User", "generate_recovery_code"]
