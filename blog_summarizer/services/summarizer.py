"""Abstractive summarization through the Hugging Face Inference API."""

import json
import logging

import requests

from blog_summarizer.exceptions import SummarizationError

logger = logging.getLogger(__name__)

DEFAULT_SUMMARIZER_URL = 'https://api-inference.huggingface.co/models/sshleifer/distilbart-cnn-12-6'

# Returned when the API answers but gives no summary_text
SUMMARY_FAILED = 'Failed to generate English summary.'


def _describe_http_error(error: requests.HTTPError) -> str:
    """Build 'Hugging Face API Error: <status> - <payload>' from a failed response."""
    response = error.response
    try:
        payload = json.dumps(response.json(), ensure_ascii=False)
    except ValueError:
        payload = json.dumps(response.text, ensure_ascii=False)
    return f"Hugging Face API Error: {response.status_code} - {payload}"


def summarize_text(
    text: str,
    api_key: str,
    url: str = DEFAULT_SUMMARIZER_URL,
    min_length: int = 50,
    max_length: int = 200,
    timeout: float = 60,
) -> str:
    """Request a summary of text.

    Args:
        text: Input text, already truncated to the model's budget
        api_key: Hugging Face API token
        url: Inference endpoint of the summarization model
        min_length: Minimum summary length (model tokens)
        max_length: Maximum summary length (model tokens)
        timeout: Seconds to wait for the API

    Returns:
        The summary, or SUMMARY_FAILED if the response had none.

    Raises:
        SummarizationError: network failure or non-2xx response
    """
    body = {
        'inputs': text,
        'parameters': {'min_length': min_length, 'max_length': max_length},
    }
    headers = {'Authorization': f'Bearer {api_key}'}

    try:
        response = requests.post(url, json=body, headers=headers, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.HTTPError as e:
        if e.response is None:
            raise SummarizationError(f"AI summarization failed (Hugging Face): {e}") from e
        detail = _describe_http_error(e)
        logger.error(detail)
        raise SummarizationError(f"AI summarization failed (Hugging Face): {detail}") from e
    except requests.RequestException as e:
        logger.error(f"Hugging Face request failed: {e}")
        raise SummarizationError(f"AI summarization failed (Hugging Face): {e}") from e
    except ValueError as e:
        logger.error(f"Hugging Face returned invalid JSON: {e}")
        raise SummarizationError("AI summarization failed (Hugging Face): invalid JSON response") from e

    summary = None
    if isinstance(data, list) and data and isinstance(data[0], dict):
        summary = data[0].get('summary_text')

    if not summary:
        logger.warning("Hugging Face response had no summary_text")
        return SUMMARY_FAILED

    return summary
