import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from ...domain.errors import DuplicateEmail, StorageFailure, ValidationFailure
from ...domain.identifiers import new_identifier
from ...domain.models import Address, User
from ...domain.ports.persistence import PersistenceGateway

logger = logging.getLogger(__name__)

_USER_UPDATABLE_FIELDS = ("name", "phone_number", "reputation")
_ADDRESS_UPDATABLE_FIELDS = ("street_name", "locality", "state", "pincode")


class SQLitePersistence(PersistenceGateway):
    """SQLite-backed implementation of the persistence gateway."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._lock = threading.Lock()
        self._initialize()

    def _initialize(self) -> None:
        with self._conn:
            self._conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    name TEXT NOT NULL DEFAULT '',
                    phone_number INTEGER NOT NULL DEFAULT 0,
                    reputation INTEGER NOT NULL DEFAULT 0,
                    verification_code TEXT,
                    is_verified INTEGER NOT NULL DEFAULT 0,
                    is_banned INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS user_addresses (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    street_name TEXT NOT NULL,
                    locality TEXT NOT NULL,
                    state TEXT NOT NULL,
                    pincode TEXT NOT NULL,
                    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
                );

                CREATE INDEX IF NOT EXISTS idx_user_addresses_user_id
                    ON user_addresses(user_id);
                """
            )

    def close(self) -> None:
        self._conn.close()

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            logger.error("SQLite failure while trying to %s: %s", action, exc)
            raise StorageFailure(f"Failed to {action}.") from exc
        except OverflowError as exc:
            logger.warning("Value out of range while trying to %s: %s", action, exc)
            raise ValidationFailure("Numeric value out of range.") from exc

    # UserRepository API ----------------------------------------------------
    def create_user(self, user: User) -> User:
        now = self._now()
        with self._guard("create user"), self._lock:
            try:
                with self._conn:
                    self._conn.execute(
                        """
                        INSERT INTO users (
                            id, email, password_hash, name, phone_number, reputation,
                            verification_code, is_verified, is_banned, created_at, updated_at
                        )
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                        """,
                        (
                            user.id,
                            user.email,
                            user.password_hash,
                            user.name,
                            user.phone_number,
                            user.reputation,
                            user.verification_code,
                            int(user.is_verified),
                            int(user.is_banned),
                            now,
                            now,
                        ),
                    )
            except sqlite3.IntegrityError as exc:
                if "users.email" in str(exc):
                    raise DuplicateEmail() from exc
                raise
        created = self.get_user_by_id(user.id)
        if not created:
            raise StorageFailure("Failed to persist user.")
        return created

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._guard("get user by email"), self._lock:
            cur = self._conn.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = cur.fetchone()
        return self._row_to_user(row) if row else None

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        with self._guard("get user by ID"), self._lock:
            cur = self._conn.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = cur.fetchone()
        return self._row_to_user(row) if row else None

    def update_user_fields(self, user_id: str, fields: Dict[str, Any]) -> int:
        updates = []
        params: List[Any] = []
        for column in _USER_UPDATABLE_FIELDS:
            if column in fields:
                updates.append(f"{column} = ?")
                params.append(fields[column])
        unknown = set(fields) - set(_USER_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported user fields: {', '.join(sorted(unknown))}")
        updates.append("updated_at = ?")
        params.append(self._now())
        params.append(user_id)
        statement = f"UPDATE users SET {', '.join(updates)} WHERE id = ?"
        with self._guard("update user"), self._lock, self._conn:
            cur = self._conn.execute(statement, params)
            return cur.rowcount

    def set_verified(self, user_id: str, is_verified: bool) -> int:
        return self._set_column(user_id, "is_verified", int(is_verified), "update user verification")

    def set_banned(self, user_id: str, is_banned: bool) -> int:
        return self._set_column(user_id, "is_banned", int(is_banned), "update ban status")

    def set_verification_code(self, user_id: str, code: Optional[str]) -> int:
        return self._set_column(user_id, "verification_code", code, "store verification code")

    def consume_verification_code(self, user_id: str, code: str) -> int:
        with self._guard("consume verification code"), self._lock, self._conn:
            cur = self._conn.execute(
                """
                UPDATE users
                SET is_verified = 1, verification_code = NULL, updated_at = ?
                WHERE id = ? AND verification_code = ?
                """,
                (self._now(), user_id, code),
            )
            return cur.rowcount

    def list_users(self) -> List[User]:
        with self._guard("list users"), self._lock:
            cur = self._conn.execute("SELECT * FROM users ORDER BY created_at ASC, id ASC")
            rows = cur.fetchall()
        return [self._row_to_user(row) for row in rows]

    def _set_column(self, user_id: str, column: str, value: Any, action: str) -> int:
        with self._guard(action), self._lock, self._conn:
            cur = self._conn.execute(
                f"UPDATE users SET {column} = ?, updated_at = ? WHERE id = ?",
                (value, self._now(), user_id),
            )
            return cur.rowcount

    # AddressRepository API -------------------------------------------------
    def insert_address(
        self,
        user_id: str,
        street_name: str,
        locality: str,
        state: str,
        pincode: str,
    ) -> Address:
        address = Address(
            id=new_identifier("addr"),
            user_id=user_id,
            street_name=street_name,
            locality=locality,
            state=state,
            pincode=pincode,
        )
        with self._guard("add address"), self._lock, self._conn:
            self._conn.execute(
                """
                INSERT INTO user_addresses (id, user_id, street_name, locality, state, pincode)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    address.id,
                    address.user_id,
                    address.street_name,
                    address.locality,
                    address.state,
                    address.pincode,
                ),
            )
        return address

    def list_addresses(self, user_id: str) -> List[Address]:
        with self._guard("retrieve addresses"), self._lock:
            cur = self._conn.execute(
                "SELECT * FROM user_addresses WHERE user_id = ? ORDER BY id ASC",
                (user_id,),
            )
            rows = cur.fetchall()
        return [self._row_to_address(row) for row in rows]

    def update_address_scoped(self, user_id: str, address_id: str, fields: Dict[str, Any]) -> int:
        updates = []
        params: List[Any] = []
        for column in _ADDRESS_UPDATABLE_FIELDS:
            if column in fields:
                updates.append(f"{column} = ?")
                params.append(fields[column])
        unknown = set(fields) - set(_ADDRESS_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported address fields: {', '.join(sorted(unknown))}")
        with self._guard("update address"), self._lock, self._conn:
            if not updates:
                cur = self._conn.execute(
                    "SELECT COUNT(*) FROM user_addresses WHERE id = ? AND user_id = ?",
                    (address_id, user_id),
                )
                return cur.fetchone()[0]
            params.extend([address_id, user_id])
            cur = self._conn.execute(
                f"UPDATE user_addresses SET {', '.join(updates)} WHERE id = ? AND user_id = ?",
                params,
            )
            return cur.rowcount

    def delete_address_scoped(self, user_id: str, address_id: str) -> int:
        with self._guard("delete address"), self._lock, self._conn:
            cur = self._conn.execute(
                "DELETE FROM user_addresses WHERE id = ? AND user_id = ?",
                (address_id, user_id),
            )
            return cur.rowcount

    # Helpers ----------------------------------------------------------------
    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _parse_datetime(value: str) -> datetime:
        result = datetime.fromisoformat(value)
        if result.tzinfo is None:
            return result.replace(tzinfo=timezone.utc)
        return result.astimezone(timezone.utc)

    def _row_to_user(self, row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            name=row["name"],
            phone_number=row["phone_number"],
            reputation=row["reputation"],
            verification_code=row["verification_code"],
            is_verified=bool(row["is_verified"]),
            is_banned=bool(row["is_banned"]),
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )

    @staticmethod
    def _row_to_address(row: sqlite3.Row) -> Address:
        return Address(
            id=row["id"],
            user_id=row["user_id"],
            street_name=row["street_name"],
            locality=row["locality"],
            state=row["state"],
            pincode=row["pincode"],
        )
