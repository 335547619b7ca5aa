from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SessionClaims:
    """Identity claims carried by a bearer token. Never persisted."""

    user_id: str
    email: str
    role: str
    reputation: int
    issued_at: datetime
    expires_at: datetime
