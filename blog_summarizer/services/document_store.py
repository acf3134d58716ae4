"""MongoDB client for the full-text document store."""

import os
import logging
import threading
import time
from typing import Optional, Tuple

from pymongo import MongoClient

from blog_summarizer.models import FullTextRecord

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = 'Blog Summarizer'
FULL_TEXTS_COLLECTION = 'full_texts'

# Server selection timeout for the connect check (ms)
DEFAULT_TIMEOUT_MS = 2000
# After a failed connect, skip new attempts for this long (seconds)
DEFAULT_RETRY_COOLDOWN = 30

# MongoDB connection (lazy initialization, shared by every request)
_mongo_client = None
_mongo_db = None
_connect_lock = threading.Lock()
_retry_after = 0.0  # monotonic time before which we don't reconnect


def is_document_store_configured() -> bool:
    """Check if MONGODB_URI is set (no connection is made)."""
    return bool(os.environ.get('MONGODB_URI'))


def _is_cooling_down() -> bool:
    return time.monotonic() < _retry_after


def get_document_db():
    """Get or create the MongoDB database handle.

    Connects at most once per process. Concurrent callers wait on the lock
    and then reuse the cached handle. A failed connection is not cached,
    but further attempts are skipped until MONGODB_RETRY_COOLDOWN seconds
    have passed, so callers queued behind a failure return right away.
    """
    global _mongo_client, _mongo_db, _retry_after

    if _mongo_db is not None:
        return _mongo_db

    mongo_uri = os.environ.get('MONGODB_URI')

    if not mongo_uri:
        logger.warning("MONGODB_URI not set - full texts will not be saved")
        return None

    if _is_cooling_down():
        logger.debug("MongoDB: last connect failed recently, skipping")
        return None

    with _connect_lock:
        if _mongo_db is not None:
            return _mongo_db
        if _is_cooling_down():
            return None

        timeout_ms = int(os.environ.get('MONGODB_TIMEOUT_MS', DEFAULT_TIMEOUT_MS))
        cooldown = float(os.environ.get('MONGODB_RETRY_COOLDOWN', DEFAULT_RETRY_COOLDOWN))

        client = None
        try:
            logger.info("MongoDB: connecting...")
            client = MongoClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)
            # Test connection
            client.admin.command('ping')
        except Exception as e:
            logger.error(f"MongoDB connection failed: {e}. Retrying in {cooldown:g}s")
            if client is not None:
                client.close()
            _retry_after = time.monotonic() + cooldown
            return None

        _mongo_client = client
        _mongo_db = client[os.environ.get('MONGODB_DB_NAME', DEFAULT_DB_NAME)]
        logger.info("MongoDB connected successfully")
        return _mongo_db


def close_document_store():
    """Close the cached connection, if any, and clear the retry cooldown."""
    global _mongo_client, _mongo_db, _retry_after

    with _connect_lock:
        if _mongo_client is not None:
            _mongo_client.close()
        _mongo_client = None
        _mongo_db = None
        _retry_after = 0.0


def save_full_text(record: FullTextRecord) -> Tuple[Optional[str], Optional[str]]:
    """Insert a full-text document.

    Returns:
        Tuple of (inserted_id, error_message)
    """
    db = get_document_db()
    if db is None:
        return None, 'MongoDB not connected'

    try:
        result = db[FULL_TEXTS_COLLECTION].insert_one(record.to_dict())
        inserted_id = str(result.inserted_id)
        logger.info(f"MongoDB: full text saved with ID: {inserted_id}")
        return inserted_id, None
    except Exception as e:
        logger.error(f"MongoDB insert_one error: {e}")
        return None, str(e)
