"""ABOUTME: User aggregate for authentication factor state
ABOUTME: Owns the recovery code pool and optional OTP record as immutable values"""

import dataclasses
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from authfactors.config import RECOVERY_CODE_COUNT, RecoveryCodeCfg
from authfactors.exceptions import InvalidRecoveryCode, RecoveryCodeFailure

from .otp import OtpCode
from .recovery_codes import RecoveryCode
from .value_objects import validate_email

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    """User aggregate root.

    Every operation returns a new ``User`` and leaves the current one
    untouched, so a snapshot can be shared between readers freely. Persisting
    the new snapshot (and guarding against two consumers racing on the same
    code) belongs to whatever stores the aggregate.

    Create users with ``User.build()``, the only supported entry point: it
    checks the email address once. The transitions copy the email unchanged
    and never check it again, so calling the dataclass constructor directly
    skips that check.
    """

    user_id: uuid.UUID
    email: str
    recovery_codes: tuple[RecoveryCode, ...] = ()
    otp: OtpCode | None = None

    @classmethod
    def build(
        cls,
        user_id: uuid.UUID,
        email: str,
        recovery_codes: Iterable[RecoveryCode] = (),
        otp: OtpCode | None = None,
    ) -> "User":
        """Build a user after checking the email address.

        Raises:
            InvalidEmail: If the email address is malformed
        """
        validate_email(email)
        return cls(user_id=user_id, email=email, recovery_codes=tuple(recovery_codes), otp=otp)

    def has_recovery_code(self, code: str) -> bool:
        """Check if the given code is in the current pool."""
        return any(rc.code == code for rc in self.recovery_codes)

    def use_recovery_code(self, code: str) -> "User":
        """Consume a recovery code and top the pool back up with a fresh one.

        Args:
            code: The recovery code presented by the user

        Returns:
            A new User with the code removed and one new code appended

        Raises:
            InvalidRecoveryCode: If the code is not in the pool
        """
        if not self.has_recovery_code(code):
            logger.info(
                "recovery code rejected", user_id=str(self.user_id), reason=RecoveryCodeFailure.NOT_FOUND.value
            )
            raise InvalidRecoveryCode(RecoveryCodeFailure.NOT_FOUND)

        remaining = [rc for rc in self.recovery_codes if rc.code != code]
        remaining.append(RecoveryCode.build(user_id=self.user_id))

        logger.info("recovery code used", user_id=str(self.user_id), pool_size=len(remaining))
        return dataclasses.replace(self, recovery_codes=tuple(remaining))

    def generate_new_recovery_codes(self, count: int = RECOVERY_CODE_COUNT) -> "User":
        """Replace the whole recovery code pool with freshly generated codes.

        Args:
            count: Pool size to generate, see ``RecoveryCodeCfg.pool_size``

        Returns:
            A new User holding exactly ``count`` new codes

        Raises:
            InvalidConfig: If count is not positive
            InvalidRecoveryCode: If any code fails validation; no codes are replaced
        """
        pool_size = RecoveryCodeCfg(pool_size=count).pool_size
        try:
            new_codes = tuple(RecoveryCode.build(user_id=self.user_id) for _ in range(pool_size))
        except InvalidRecoveryCode as error:
            logger.error("recovery code generation failed", user_id=str(self.user_id), count=count)
            raise InvalidRecoveryCode(RecoveryCodeFailure.GENERATION_FAILED) from error

        logger.info("recovery codes regenerated", user_id=str(self.user_id), pool_size=len(new_codes))
        return dataclasses.replace(self, recovery_codes=new_codes)
