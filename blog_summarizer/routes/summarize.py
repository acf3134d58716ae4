"""Summarize route: blog URL in, English summary and Urdu translation out."""

from flask import Blueprint, request, jsonify, current_app
import logging

from blog_summarizer.constants import URDU_FAILURE_NOTICE
from blog_summarizer.exceptions import (
    ValidationError,
    ExtractionError,
    ConfigurationError,
)
from blog_summarizer.models import SummaryRecord, FullTextRecord
from blog_summarizer.services.extractor import fetch_html, extract_text
from blog_summarizer.services.summarizer import summarize_text, SUMMARY_FAILED
from blog_summarizer.services.translation import translate
from blog_summarizer.services.storage import save_summary
from blog_summarizer.services.document_store import save_full_text
from blog_summarizer.utils import run_side_effect

summarize_bp = Blueprint('summarize', __name__)
logger = logging.getLogger(__name__)


def _get_url_from_request() -> str:
    data = request.get_json(silent=True) or {}
    url = data.get('url') if isinstance(data, dict) else None

    if not isinstance(url, str) or not url.strip():
        logger.info("URL is missing.")
        raise ValidationError('URL is required.')

    return url


def _persist(url: str, article_text: str, english_summary: str, urdu_summary: str):
    """Write both records. Failures are logged, never raised."""
    run_side_effect(
        'supabase.save_summary',
        save_summary,
        SummaryRecord(url=url, english_summary=english_summary, urdu_summary=urdu_summary),
    )
    run_side_effect(
        'mongodb.save_full_text',
        save_full_text,
        FullTextRecord(url=url, full_text=article_text),
    )


@summarize_bp.route('/summarize', methods=['POST'])
def summarize():
    """Summarize a blog post and translate the summary.

    Body:
    - url: Blog post URL (required)

    Returns {englishSummary, urduSummary}. Errors are {error} with
    400 (missing URL, no extractable text) or 500 (fetch, configuration,
    summarization or unexpected failure).
    """
    config = current_app.config
    url = _get_url_from_request()
    logger.info(f"Received URL: {url}")

    # Records keep the URL as submitted
    html = fetch_html(url.strip(), timeout=config['FETCH_TIMEOUT'])

    article_text = extract_text(html)
    logger.info(f"Extracted article text. Length: {len(article_text)}")
    logger.debug(f"First 500 chars of extracted text: {article_text[:500]}")

    if not article_text.strip():
        logger.info("Could not extract sufficient text.")
        raise ExtractionError(
            'Could not extract sufficient text from the blog. '
            'Please check the URL or try a different one.'
        )

    api_key = config.get('HUGGINGFACE_API_KEY')
    if not api_key:
        logger.error("Hugging Face API key is not set. Cannot proceed with AI summarization.")
        raise ConfigurationError(
            'Hugging Face API key is not configured on the server. '
            'Please set HUGGINGFACE_API_KEY.'
        )

    limited_text = article_text[:config['SUMMARY_INPUT_LIMIT']]
    logger.info(f"Requesting English summary for {len(limited_text)} chars")

    english_summary = summarize_text(
        limited_text,
        api_key,
        url=config['HUGGINGFACE_SUMMARIZER_URL'],
        min_length=config['SUMMARY_MIN_LENGTH'],
        max_length=config['SUMMARY_MAX_LENGTH'],
        timeout=config['SUMMARIZER_TIMEOUT'],
    )

    if english_summary and english_summary != SUMMARY_FAILED:
        urdu_summary = translate(english_summary)
        logger.info("Urdu summary generated from dictionary.")
    else:
        urdu_summary = URDU_FAILURE_NOTICE
        logger.info("English summary not available, using Urdu failure notice.")

    _persist(url, article_text, english_summary, urdu_summary)

    return jsonify({
        'englishSummary': english_summary,
        'urduSummary': urdu_summary,
    }), 200
