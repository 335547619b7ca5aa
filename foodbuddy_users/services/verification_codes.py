"""Issuing and matching of email verification codes."""

import secrets
from typing import Optional

CODE_LENGTH = 6


class VerificationCodeGenerator:
    """Generates fixed-width numeric verification codes from a CSPRNG."""

    def __init__(self, length: int = CODE_LENGTH):
        self.length = length

    def generate(self) -> str:
        return f"{secrets.randbelow(10 ** self.length):0{self.length}d}"

    @staticmethod
    def matches(stored_code: Optional[str], submitted_code: str) -> bool:
        # A consumed (cleared) code never matches anything.
        if not stored_code:
            return False
        return secrets.compare_digest(stored_code.encode("utf-8"), submitted_code.encode("utf-8"))
