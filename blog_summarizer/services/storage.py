"""Supabase service for the structured summary store.

Each successful summarize request writes one row to the `summaries` table:
- url: the blog URL the caller submitted
- english_summary: summary returned by the model
- urdu_summary: dictionary translation of the summary
"""

import os
import logging
import threading
from typing import Optional, Tuple

from supabase import create_client

from blog_summarizer.models import SummaryRecord

logger = logging.getLogger(__name__)

SUMMARIES_TABLE = 'summaries'

# Supabase client (lazy initialization)
_supabase_client = None
_client_lock = threading.Lock()


def _get_credentials() -> Tuple[Optional[str], Optional[str]]:
    url = os.getenv('SUPABASE_URL')
    key = os.getenv('SUPABASE_ANON_KEY') or os.getenv('SUPABASE_SERVICE_KEY')
    return url, key


def is_storage_configured() -> bool:
    """Check if Supabase credentials are present (no connection is made)."""
    url, key = _get_credentials()
    return bool(url and key)


def get_supabase_client():
    """Get or create the Supabase client.

    The client is built once per process; the lock keeps concurrent first
    requests from building it twice. Returns None when not configured or
    when creation fails.
    """
    global _supabase_client

    if _supabase_client is not None:
        return _supabase_client

    url, key = _get_credentials()
    if not url or not key:
        logger.warning('Supabase credentials not configured. Summary rows will not be saved.')
        return None

    with _client_lock:
        if _supabase_client is None:
            try:
                _supabase_client = create_client(url, key)
                logger.info('Supabase client initialized successfully')
            except Exception as e:
                logger.error(f'Failed to initialize Supabase client: {e}')
                return None

    return _supabase_client


def reset_supabase_client():
    """Drop the cached client so the next call re-reads the environment."""
    global _supabase_client
    with _client_lock:
        _supabase_client = None


def save_summary(record: SummaryRecord) -> Tuple[Optional[dict], Optional[str]]:
    """Insert a summary row.

    Returns:
        Tuple of (inserted_row, error_message)
        If successful: (row, None)
        If failed or skipped: (None, error_message)
    """
    client = get_supabase_client()

    if client is None:
        return None, 'Supabase not configured'

    try:
        logger.info(f'Saving summary for {record.url} to {SUMMARIES_TABLE}')
        result = client.table(SUMMARIES_TABLE).insert(record.to_dict()).execute()
        row = result.data[0] if result.data else None
        logger.info(f'Summary saved to Supabase: {row}')
        return row, None
    except Exception as e:
        error_msg = str(e)
        logger.error(f'Supabase insert failed: {error_msg}')
        return None, error_msg
