"""Shared constants for the application."""

from blog_summarizer.constants.urdu_dictionary import (
    URDU_WORD_PAIRS,
    URDU_DICTIONARY,
    URDU_FAILURE_NOTICE,
    build_translation_table,
)

__all__ = [
    'URDU_WORD_PAIRS',
    'URDU_DICTIONARY',
    'URDU_FAILURE_NOTICE',
    'build_translation_table',
]
