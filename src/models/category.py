"""
Category scoring data models.

Keyword counts produced by the category aggregator and the flattened
entries the chart consumes.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class KeywordCount:
    """Aggregated count of one configured keyword."""
    word: str
    count: int


@dataclass(frozen=True)
class ChartEntry:
    """One bar of the word frequency chart."""
    word: str
    count: int
    category: str

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "word": self.word,
            "count": self.count,
            "category": self.category
        }


# Ranked keyword counts of one category
CategoryScore = Tuple[KeywordCount, ...]

# Category name -> ranked keyword counts
CategoryData = Dict[str, CategoryScore]
