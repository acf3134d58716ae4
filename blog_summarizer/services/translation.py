"""Word-for-word English -> Urdu translation using a static dictionary.

This is not real translation: every word is looked up on its own, so there
is no grammar, no context and no reordering. Structure of the source text
(spacing, punctuation, line breaks) is carried through untouched.
"""
import re
import logging
from typing import Mapping

from blog_summarizer.constants import URDU_DICTIONARY

logger = logging.getLogger(__name__)

# A word is a run of Unicode word characters; anything else is its own
# single-character token.
TOKEN_PATTERN = re.compile(r'\w+|\W')


def tokenize(text: str) -> list[str]:
    """Split text into word and separator tokens.

    Nothing is dropped: ''.join(tokenize(text)) == text.
    """
    if not text:
        return []
    return TOKEN_PATTERN.findall(text)


def translate_tokens(tokens: list[str], table: Mapping[str, str] = URDU_DICTIONARY) -> list[str]:
    """Replace each known word token with its table value.

    Whitespace-only tokens and unknown tokens pass through unchanged.
    The result always has the same length as the input.
    """
    translated = []
    for token in tokens:
        if token.strip() and token in table:
            translated.append(table[token])
        else:
            translated.append(token)
    return translated


def translate(text: str, table: Mapping[str, str] = URDU_DICTIONARY) -> str:
    """
    Translate text word by word.

    The input is lowercased before tokenizing, so lookups are
    case-insensitive. Output casing is whatever the table stores.

    Args:
        text: English text (may be empty)
        table: Lowercase word -> replacement mapping

    Returns:
        The translated text ('' for empty input)
    """
    if not text:
        return ''

    tokens = tokenize(text.lower())
    result = ''.join(translate_tokens(tokens, table))
    logger.debug(f"Translated {len(tokens)} tokens")
    return result


translate_to_urdu = translate
