"""
Word Frequency Counter.

Tokenizes review text across the whole corpus and counts each word.
"""

import logging
from collections import Counter
from typing import Iterable, List, Tuple

from src.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


class WordFrequencyCounter:
    """
    Counts lowercase whitespace-separated tokens across all reviews.

    Tokens shorter than min_token_length are skipped entirely.
    The map is rebuilt from scratch on every call.
    """

    def __init__(self, min_token_length: int = settings.MIN_TOKEN_LENGTH):
        self.min_token_length = min_token_length

    def count(self, reviews: Iterable[Review]) -> Counter:
        """
        Count word occurrences.

        Args:
            reviews: Reviews with normalized text

        Returns:
            Counter mapping lowercase token -> occurrences
        """
        word_freqs = Counter()
        for review in reviews:
            word_freqs.update(
                token for token in review.text.lower().split()
                if len(token) >= self.min_token_length
            )

        logger.info(
            f"Counted {len(word_freqs)} unique words "
            f"(total tokens: {sum(word_freqs.values())})"
        )
        return word_freqs

    @staticmethod
    def most_common(word_freqs: Counter, n: int) -> List[Tuple[str, int]]:
        """Top n words by count, ties in first-seen order."""
        return word_freqs.most_common(n)
