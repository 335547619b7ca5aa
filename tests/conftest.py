"""Shared pytest fixtures for the user service tests."""

from __future__ import annotations

from typing import Iterator, List, Tuple

import pytest
from fastapi.testclient import TestClient

from foodbuddy_users.application.services.account_service import AccountService
from foodbuddy_users.application.services.address_service import AddressService
from foodbuddy_users.core.app_factory import create_application
from foodbuddy_users.core.config import Settings
from foodbuddy_users.infrastructure.persistence.sqlite import SQLitePersistence
from foodbuddy_users.services.password_hasher import PasswordHasher
from foodbuddy_users.services.token_service import TokenService
from foodbuddy_users.services.verification_codes import VerificationCodeGenerator

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class RecordingEmailService:
    """Stands in for SMTP delivery and keeps every code it was asked to send."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    def send_verification_code(self, to_email: str, code: str) -> bool:
        self.sent.append((to_email, code))
        return True

    def last_code_for(self, email: str) -> str:
        return [code for to_email, code in self.sent if to_email == email][-1]


@pytest.fixture()
def persistence(tmp_path) -> Iterator[SQLitePersistence]:
    store = SQLitePersistence(tmp_path / "users.db")
    yield store
    store.close()


@pytest.fixture()
def token_service() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture()
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture()
def account_service(persistence, token_service, email_service) -> AccountService:
    return AccountService(
        persistence=persistence,
        password_hasher=PasswordHasher(rounds=4),
        token_service=token_service,
        code_generator=VerificationCodeGenerator(),
        email_service=email_service,
    )


@pytest.fixture()
def address_service(persistence) -> AddressService:
    return AddressService(persistence)


@pytest.fixture()
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "api.db"))
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("SMTP_HOST", "")
    return Settings()


@pytest.fixture()
def client(settings) -> Iterator[TestClient]:
    with TestClient(create_application(settings)) as test_client:
        yield test_client
