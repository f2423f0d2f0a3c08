"""
Category Aggregator.

Scores the word frequency map against the fixed keyword categories.
"""

import logging
from typing import Mapping, Optional, Sequence

from src.models.category import CategoryData, CategoryScore, KeywordCount
import config.settings as settings

logger = logging.getLogger(__name__)


class CategoryAggregator:
    """
    Aggregates word counts into per-category keyword rankings.

    A keyword's count is the sum of the counts of every token that contains
    the keyword as a substring. "quality" therefore also picks up
    "qualitative", and "foam" picks up "foaming". The match is deliberately
    coarse; it is not a bug.
    """

    def __init__(self, config: Mapping[str, Sequence[str]] = settings.CATEGORY_KEYWORDS):
        """
        Initialize category aggregator.

        Args:
            config: Category name -> ordered keyword list
        """
        self.config = config

    def aggregate(
        self,
        word_freqs: Mapping[str, int],
        config: Optional[Mapping[str, Sequence[str]]] = None
    ) -> CategoryData:
        """
        Build ranked keyword counts for every configured category.

        Args:
            word_freqs: Lowercase token -> count
            config: Overrides the keyword table given at construction

        Returns:
            Category name -> keyword counts (count > 0 only), count descending.
            Every configured category is present, possibly with no entries.
        """
        config = config if config is not None else self.config
        category_data = {
            category: self._score_category(keywords, word_freqs)
            for category, keywords in config.items()
        }

        logger.info(
            "Aggregated categories: " + ", ".join(
                f"{category}={len(scores)}" for category, scores in category_data.items()
            )
        )
        return category_data

    def _score_category(
        self,
        keywords: Sequence[str],
        word_freqs: Mapping[str, int]
    ) -> CategoryScore:
        counts = []
        for keyword in keywords:
            count = self.keyword_count(keyword, word_freqs)
            if count > 0:
                counts.append(KeywordCount(word=keyword, count=count))

        # sorted() is stable, so equal counts keep keyword-definition order
        return tuple(sorted(counts, key=lambda item: item.count, reverse=True))

    @staticmethod
    def keyword_count(keyword: str, word_freqs: Mapping[str, int]) -> int:
        """Sum counts of all tokens containing keyword."""
        needle = keyword.lower()
        return sum(count for token, count in word_freqs.items() if needle in token)


def max_count(category_data: CategoryData) -> int:
    """Highest keyword count across all categories, 0 when there is none."""
    return max(
        (item.count for scores in category_data.values() for item in scores),
        default=0
    )

