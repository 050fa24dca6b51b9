"""Tests for password reset email delivery and Celery tasks."""

import smtplib
from unittest.mock import MagicMock, patch

from namcol.config import Settings
from namcol.models.password_reset_token import PasswordResetToken
from namcol.services.auth import AuthService
from namcol.services.email_service import RESET_SUBJECT, EmailService
from namcol.tasks.maintenance import purge_expired_reset_tokens
from namcol.tasks.notifications import queue_password_reset_email, send_password_reset_email


def _settings(**overrides) -> Settings:
    values = {
        "frontend_url": "https://namcol.example.com",
        "smtp_server": "smtp.example.com",
        "smtp_port": 587,
        "smtp_username": "support@example.com",
        "smtp_password": "app-password",
    }
    values.update(overrides)
    return Settings(**values)


class TestEmailService:
    """Tests for EmailService."""

    def test_reset_link(self):
        service = EmailService(_settings())
        assert service.reset_link("abc") == "https://namcol.example.com/reset-password?token=abc"

    def test_sends_reset_email(self):
        """Test the reset email goes out over STARTTLS with the link in both parts."""
        service = EmailService(_settings())

        with patch("namcol.services.email_service.smtplib.SMTP") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value

            assert service.send_password_reset_email("user@example.com", "tok123") is True

            mock_smtp.assert_called_once_with("smtp.example.com", 587)
            server.starttls.assert_called_once()
            server.login.assert_called_once_with("support@example.com", "app-password")
            message = server.send_message.call_args[0][0]

        assert message["To"] == "user@example.com"
        assert str(message["Subject"]) == RESET_SUBJECT
        text_part, html_part = message.get_payload()
        link = "https://namcol.example.com/reset-password?token=tok123"
        assert link in text_part.get_payload(decode=True).decode()
        assert link in html_part.get_payload(decode=True).decode()
        assert "15 minutes" in text_part.get_payload(decode=True).decode()

    def test_skips_login_without_credentials(self):
        service = EmailService(_settings(smtp_username=None, smtp_password=None))

        with patch("namcol.services.email_service.smtplib.SMTP") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            assert service.send_password_reset_email("user@example.com", "tok") is True
            server.login.assert_not_called()

    def test_smtp_failure_returns_false(self):
        """Test SMTP errors are logged and reported as a failed send."""
        service = EmailService(_settings())

        with patch("namcol.services.email_service.smtplib.SMTP") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

            assert service.send_password_reset_email("user@example.com", "tok") is False

    def test_connection_failure_returns_false(self):
        service = EmailService(_settings())

        with patch(
            "namcol.services.email_service.smtplib.SMTP", side_effect=ConnectionRefusedError()
        ):
            assert service.send_password_reset_email("user@example.com", "tok") is False


class TestNotificationTasks:
    """Tests for the Celery notification tasks."""

    def test_queue_enqueues_task(self):
        """Test the gateway enqueues delivery instead of sending inline."""
        with patch("namcol.tasks.notifications.send_password_reset_email.delay") as mock_delay:
            queue_password_reset_email("user@example.com", "tok")

        mock_delay.assert_called_once_with("user@example.com", "tok")

    def test_task_sends_email(self):
        with patch("namcol.tasks.notifications.EmailService") as mock_service_cls:
            mock_service_cls.return_value.send_password_reset_email.return_value = True

            assert send_password_reset_email("user@example.com", "tok") is True

        mock_service_cls.return_value.send_password_reset_email.assert_called_once_with(
            "user@example.com", "tok"
        )

    def test_task_reports_failed_delivery(self):
        with patch("namcol.tasks.notifications.EmailService") as mock_service_cls:
            mock_service_cls.return_value.send_password_reset_email.return_value = False

            assert send_password_reset_email("user@example.com", "tok") is False


class TestMaintenanceTasks:
    """Tests for periodic housekeeping."""

    def test_purge_task_uses_fresh_session(self, db, client, registered_user):
        from datetime import UTC, datetime, timedelta

        token = AuthService(db).request_password_reset(registered_user["email"])
        token.expires_at = datetime.now(UTC) - timedelta(minutes=5)
        db.commit()

        session = MagicMock(wraps=db)
        with patch("namcol.tasks.maintenance.SessionLocal", return_value=session):
            result = purge_expired_reset_tokens()

        assert result == {"deleted": 1}
        assert db.query(PasswordResetToken).count() == 0
        session.close.assert_called_once()
