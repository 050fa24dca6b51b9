"""Periodic housekeeping tasks."""

import logging

from sqlalchemy.orm import Session

from namcol.celery_app import app as celery_app
from namcol.database import SessionLocal
from namcol.services.auth import AuthService

logger = logging.getLogger(__name__)


@celery_app.task
def purge_expired_reset_tokens() -> dict:
    """Delete expired password reset tokens.

    This task runs every 15 minutes via celery-beat.
    """
    db: Session = SessionLocal()
    try:
        deleted = AuthService(db).purge_expired_reset_tokens()
        if deleted:
            logger.info(f"Purged {deleted} expired password reset tokens")
        return {"deleted": deleted}
    finally:
        db.close()
