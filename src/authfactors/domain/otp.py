"""ABOUTME: OtpCode domain model for one-time password metadata
ABOUTME: Pure data holder, verification and expiry checks live outside the domain core"""

import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class OtpCode:
    """One-time password record owned by a single user."""

    user_id: uuid.UUID
    code: str
    active: bool
    expires_at: datetime
