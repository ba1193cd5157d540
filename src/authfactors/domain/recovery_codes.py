"""ABOUTME: RecoveryCode domain model for single-use 2FA recovery codes
ABOUTME: Contains the validated constructor and random alphabetic code generation"""

import secrets
import string
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from authfactors.config import RECOVERY_CODE_LENGTH
from authfactors.exceptions import InvalidRecoveryCode, RecoveryCodeFailure


def generate_code_character() -> str:
    """Pick a letter case at random, then a letter uniformly from all 26 of that case."""
    if secrets.randbelow(2):
        return secrets.choice(string.ascii_uppercase)
    return secrets.choice(string.ascii_lowercase)


def generate_recovery_code(length: int = RECOVERY_CODE_LENGTH) -> str:
    """Generate a random mixed-case alphabetic recovery code."""
    return "".join(generate_code_character() for _ in range(length))


def validate_recovery_code(code: str) -> None:
    if len(code) != RECOVERY_CODE_LENGTH:
        raise InvalidRecoveryCode(
            RecoveryCodeFailure.INVALID_LENGTH,
            detail=f"expected {RECOVERY_CODE_LENGTH} characters, got {len(code)}",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RecoveryCode:
    """Recovery code owned by a single user.

    The code length is checked whenever a value is constructed, directly or
    through ``RecoveryCode.build()``, which also fills in a generated code and
    the creation time. ``active`` is carried for external
    verification workflows; consuming a code removes it from the user's pool
    instead of flipping this flag.
    """

    user_id: uuid.UUID
    code: str
    active: bool = False
    date_created: datetime

    def __post_init__(self) -> None:
        validate_recovery_code(self.code)

    @classmethod
    def build(
        cls,
        user_id: uuid.UUID,
        code: str | None = None,
        active: bool = False,
        date_created: datetime | None = None,
    ) -> "RecoveryCode":
        """Build a recovery code, generating one when no code is supplied.

        Raises:
            InvalidRecoveryCode: If the code is not exactly 16 characters long
        """
        if code is None:
            code = generate_recovery_code()
        return cls(
            user_id=user_id,
            code=code,
            active=active,
            date_created=date_created or datetime.now(UTC),
        )

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"RecoveryCode(user_id={self.user_id!r}, active={self.active!r}, date_created={self.date_created!r})"
