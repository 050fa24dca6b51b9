"""Celery tasks for outbound notifications."""

import logging

from namcol.celery_app import app as celery_app
from namcol.services.email_service import EmailService

logger = logging.getLogger(__name__)


@celery_app.task
def send_password_reset_email(email: str, token: str) -> bool:
    """Deliver a password reset email.

    Returns:
        True if the SMTP server accepted the message
    """
    sent = EmailService().send_password_reset_email(email, token)
    if not sent:
        logger.error(f"Password reset email to {email} was not delivered")
    return sent


def queue_password_reset_email(email: str, token: str) -> None:
    """Notification gateway used by the API: enqueue delivery and return."""
    send_password_reset_email.delay(email, token)
    logger.info(f"Queued password reset email for {email}")
