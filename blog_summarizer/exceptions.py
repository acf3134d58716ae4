"""Exceptions raised along the summarize pipeline.

Each exception carries the HTTP status it maps to. The error handlers
registered in create_app() turn them into {"error": message} responses.
"""

from typing import Optional


class SummarizerAppError(Exception):
    """Base exception for the blog summarizer."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationError(SummarizerAppError):
    """Request input is missing or malformed."""

    status_code = 400


class ExtractionError(SummarizerAppError):
    """The fetched page has no usable text."""

    status_code = 400


class FetchError(SummarizerAppError):
    """The blog page could not be retrieved."""

    status_code = 500


class ConfigurationError(SummarizerAppError):
    """A required server-side secret is not configured."""

    status_code = 500


class SummarizationError(SummarizerAppError):
    """The remote summarization call failed."""

    status_code = 500


class InternalError(SummarizerAppError):
    """Unexpected failure not covered by the other errors."""

    status_code = 500
