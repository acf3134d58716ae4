"""Blog page retrieval and visible-text extraction."""

import logging

import requests
from bs4 import BeautifulSoup, UnicodeDammit

from blog_summarizer.exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}

# Elements whose text makes up the article body
CONTENT_SELECTOR = 'p, h1, h2, h3, h4, h5, h6, li'


def _decode_body(response) -> str:
    """Decode a page body.

    A charset in the Content-Type header wins. Otherwise the bytes are
    checked for a <meta charset>, then tried as UTF-8, then detected.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        return response.text

    dammit = UnicodeDammit(response.content, user_encodings=["utf-8"], is_html=True)
    return dammit.unicode_markup or ""


def fetch_html(url: str, timeout: float = 10) -> str:
    """Download a page and return its HTML.

    Raises:
        FetchError: host unreachable, timeout, or non-2xx status
    """
    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else 'unknown'
        logger.warning(f"Fetching {url} failed with status {status}")
        raise FetchError(f"Failed to fetch blog content: status {status}") from e
    except requests.RequestException as e:
        logger.warning(f"Fetching {url} failed: {e}")
        raise FetchError(f"Failed to fetch blog content: {e}") from e

    html = _decode_body(response)
    logger.info(f"Fetched {url} ({len(html)} chars)")
    return html


def extract_text(html: str) -> str:
    """Concatenate the text of headings, paragraphs and list items.

    Elements are visited in document order and each one contributes its
    full text followed by a newline. Nested matches (a <p> inside an <li>)
    therefore appear twice.
    """
    if not html:
        return ''

    soup = BeautifulSoup(html, 'html.parser')
    parts = [el.get_text() + '\n' for el in soup.select(CONTENT_SELECTOR)]
    return ''.join(parts)
