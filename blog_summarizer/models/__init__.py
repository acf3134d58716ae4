"""Record types for the blog summarizer."""

from .records import SummaryRecord, FullTextRecord

__all__ = ['SummaryRecord', 'FullTextRecord']
