"""Service for sending verification emails."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(
        self,
        smtp_host: str = "",
        smtp_port: int = 587,
        smtp_username: str = "",
        smtp_password: str = "",
        from_email: str = "",
        from_name: str = "FoodBuddy",
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username
        self.smtp_password = smtp_password
        self.from_email = from_email
        self.from_name = from_name
        self.enabled = bool(self.smtp_host and self.smtp_username and self.from_email)

    def send_verification_code(self, to_email: str, code: str) -> bool:
        """
        Send the email verification code to a freshly registered user.

        Args:
            to_email: Recipient email
            code: Six-digit verification code

        Returns:
            True if sent (or SMTP is disabled), False on delivery failure
        """
        if not self.enabled:
            logger.info("SMTP disabled; verification code for %s not mailed", to_email)
            logger.debug("Undelivered verification code for %s: %s", to_email, code)
            return True

        subject = "Verify your email - FoodBuddy"
        html_body = f"""
        <html>
            <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
                <h1 style="color: #1e293b;">Welcome to FoodBuddy!</h1>
                <p style="color: #475569; line-height: 1.6;">
                    Use the code below to verify your email address:
                </p>
                <p style="font-size: 32px; font-weight: bold; letter-spacing: 6px; text-align: center;">
                    {code}
                </p>
                <p style="color: #64748b; font-size: 14px;">
                    If you did not create a FoodBuddy account, you can ignore this email.
                </p>
            </body>
        </html>
        """

        text_body = f"""
        FoodBuddy - Email verification

        Your verification code is: {code}

        If you did not create a FoodBuddy account, you can ignore this email.
        """

        return self._send_email(to_email, subject, html_body, text_body)

    def _send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> bool:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self.from_name} <{self.from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain", "utf-8"))
        msg.attach(MIMEText(html_body, "html", "utf-8"))

        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning("Failed to send email to %s: %s", to_email, exc)
            return False

        return True
