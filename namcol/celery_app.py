"""Celery worker and beat configuration.

Password reset emails are sent from the worker so the API never waits on
SMTP. Beat drives the expired reset token purge.
"""

from celery import Celery
from celery.schedules import crontab

from namcol.config import get_settings

settings = get_settings()

app = Celery(
    "namcol",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["namcol.tasks.notifications", "namcol.tasks.maintenance"],
)

app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    # SMTP round trips are short; a stuck relay should not pin a worker
    task_time_limit=60,
    task_soft_time_limit=45,
    result_expires=3600,
    beat_schedule={
        "purge-expired-reset-tokens": {
            "task": "namcol.tasks.maintenance.purge_expired_reset_tokens",
            "schedule": crontab(minute="*/15"),
        },
    },
)
