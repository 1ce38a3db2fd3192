"""Lexicon-based sentiment scoring."""

import re

from .lexicon import NEGATIVE_WORDS, POSITIVE_WORDS

WORD_PATTERN = re.compile(r"\b\w+\b")


def compute_sentiment(text: str) -> int:
    """Rate how an interaction felt on a 1 (bad) to 5 (excellent) scale.

    The score is the number of positive minus negative lexicon hits, scaled per
    ten words, so a single strong word in a short note counts for more than the
    same word in a long one.

    Args:
        text: Free-text description of the interaction

    Returns:
        Rating between 1 and 5, 3 when the text is empty or has no lexicon hits
    """
    if not text.strip():
        return 3

    words = WORD_PATTERN.findall(text.lower())
    if not words:
        return 3

    score = sum(1 for w in words if w in POSITIVE_WORDS) - sum(
        1 for w in words if w in NEGATIVE_WORDS
    )
    normalized = (score / len(words)) * 10

    if normalized <= -1.0:
        return 1
    if normalized <= -0.3:
        return 2
    if normalized <= 0.3:
        return 3
    if normalized <= 1.0:
        return 4
    return 5
