"""Shared utilities for the blog summarizer."""

from blog_summarizer.utils.side_effects import run_side_effect

__all__ = [
    'run_side_effect',
]
