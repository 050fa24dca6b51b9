"""Document store (MongoDB) connection management."""

import logging

from mongoengine import connect
from mongoengine.connection import ConnectionFailure, get_connection

from namcol.config import get_settings

logger = logging.getLogger(__name__)


def init_document_store() -> None:
    """Register the default mongoengine connection unless one already exists.

    The underlying pymongo client connects lazily, so this does no network I/O.
    """
    try:
        get_connection()
        return
    except ConnectionFailure:
        pass

    settings = get_settings()
    connect(db=settings.mongodb_db, host=settings.mongodb_url)
    logger.info(f"Registered document store connection for database {settings.mongodb_db}")
