"""bcrypt-backed password hashing."""

import bcrypt


class PasswordHasher:
    """Hashes and verifies passwords with a salted, tunable-cost bcrypt digest."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plain text password

        Returns:
            bcrypt hash including its random salt and cost factor
        """
        return bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)
        ).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        A corrupted or malformed hash is reported as a plain mismatch so callers
        cannot tell the two cases apart.
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
