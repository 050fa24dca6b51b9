"""Email service for password reset mail over SMTP."""

import logging
import smtplib
from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from namcol.config import Settings, get_settings

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Reset Your Password - ÑamCol"


class EmailService:
    """Service for sending transactional email."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def reset_link(self, token: str) -> str:
        return f"{self.settings.frontend_url}/reset-password?token={token}"

    def send_email(self, to_email: str, subject: str, body: str, html_body: str) -> bool:
        """Send a multipart (plain + HTML) message. Returns False on failure."""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = Header(subject, "utf-8")
        msg["From"] = f'"Support" <{self.settings.sender_address}>'
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain"))
        msg.attach(MIMEText(html_body, "html"))

        try:
            with smtplib.SMTP(self.settings.smtp_server, self.settings.smtp_port) as server:
                server.starttls()
                if self.settings.smtp_username and self.settings.smtp_password:
                    server.login(self.settings.smtp_username, self.settings.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to_email}: {e}")
            return False

        logger.info(f"Email sent to {to_email}")
        return True

    def send_password_reset_email(self, to_email: str, token: str) -> bool:
        """Send the password reset link."""
        reset_url = self.reset_link(token)
        minutes = self.settings.reset_token_expire_minutes

        text_body = (
            "Hello,\n\n"
            "You requested to reset your password. Open the link below to choose a new one:\n\n"
            f"{reset_url}\n\n"
            f"The link will expire in {minutes} minutes.\n\n"
            "If you didn't request this, you can ignore this email."
        )

        html_body = f"""
        <html>
            <body style="font-family: 'Poppins', sans-serif; background-color: #f9f9f9;">
                <h1 style="color: #333;">Password Reset</h1>
                <p>Hello,</p>
                <p>You requested to reset your password.</p>
                <p>Please click the button below. The link will expire in
                   <strong>{minutes} minutes</strong>.</p>
                <p>
                    <a href="{reset_url}"
                       style="background-color: #FFC042; color: #000; text-decoration: none;
                              padding: 12px 24px; border-radius: 8px; font-weight: 600;
                              display: inline-block;">
                        Reset Password
                    </a>
                </p>
                <p>If the button doesn't work, copy and paste this link into your browser:<br>
                   <a href="{reset_url}" style="color: #FFC042;">{reset_url}</a></p>
            </body>
        </html>
        """

        return self.send_email(to_email, RESET_SUBJECT, text_body, html_body)
