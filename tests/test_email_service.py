"""Tests for SMTP delivery of verification codes."""

import logging
import smtplib

import pytest

from foodbuddy_users.services.email_service import EmailService


class FakeSMTP:
    """Minimal stand-in for ``smtplib.SMTP`` that records what it was asked to do."""

    instances = []

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.credentials = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def starttls(self) -> None:
        pass

    def login(self, username: str, password: str) -> None:
        self.credentials = (username, password)

    def send_message(self, msg) -> None:
        self.messages.append(msg)


@pytest.fixture()
def mailer() -> EmailService:
    return EmailService(
        smtp_host="smtp.example.com",
        smtp_port=2525,
        smtp_username="mailer",
        smtp_password="secret",
        from_email="noreply@example.com",
    )


@pytest.fixture(autouse=True)
def reset_fake_smtp():
    FakeSMTP.instances = []


def test_sends_code_over_smtp(mailer, monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)

    assert mailer.send_verification_code("a@x.com", "042137") is True

    (server,) = FakeSMTP.instances
    assert (server.host, server.port) == ("smtp.example.com", 2525)
    assert server.credentials == ("mailer", "secret")
    (msg,) = server.messages
    assert msg["To"] == "a@x.com"
    assert "042137" in msg.as_string()


def test_connection_error_reports_failure(mailer, monkeypatch):
    def refuse(host, port):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtplib, "SMTP", refuse)

    assert mailer.send_verification_code("a@x.com", "042137") is False


def test_smtp_error_reports_failure(mailer, monkeypatch):
    class RejectingSMTP(FakeSMTP):
        def login(self, username: str, password: str) -> None:
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

    monkeypatch.setattr(smtplib, "SMTP", RejectingSMTP)

    assert mailer.send_verification_code("a@x.com", "042137") is False
    assert FakeSMTP.instances[0].messages == []


def test_disabled_smtp_does_not_connect_or_log_code(monkeypatch, caplog):
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    caplog.set_level(logging.INFO, logger="foodbuddy_users.services.email_service")

    assert EmailService().send_verification_code("a@x.com", "042137") is True

    assert FakeSMTP.instances == []
    assert "a@x.com" in caplog.text
    assert "042137" not in caplog.text
