"""
Unit tests for the Category Aggregator.
"""

from collections import Counter
from types import MappingProxyType

import pytest
from src.agents.aggregation import CategoryAggregator, max_count
from src.models.category import KeywordCount
import config.settings as settings


@pytest.fixture
def aggregator():
    return CategoryAggregator()


def test_substring_matching(aggregator):
    """Test that a keyword counts every token it appears inside."""
    freqs = Counter({"quality": 2, "high-quality": 1, "equal": 4})

    result = aggregator.aggregate(freqs)

    assert KeywordCount(word="quality", count=3) in result["quality"]


def test_foam_matches_foaming(aggregator):
    result = aggregator.aggregate(Counter({"foaming": 2, "foam.": 1}))
    assert result["technical"] == (KeywordCount(word="foam", count=3),)


def test_all_categories_present(aggregator):
    """Test that categories without matches are empty, not missing."""
    result = aggregator.aggregate(Counter({"attic": 1}))

    assert set(result) == set(settings.CATEGORY_KEYWORDS)
    assert result["quality"] == ()
    assert result["service"] == ()
    assert result["performance"] == ()


def test_empty_frequencies(aggregator):
    result = aggregator.aggregate(Counter())
    assert result == {category: () for category in settings.CATEGORY_KEYWORDS}


def test_sorted_by_count_descending(aggregator):
    freqs = Counter({"great": 1, "amazing": 5, "professional": 2})

    result = aggregator.aggregate(freqs)

    assert [item.word for item in result["quality"]] == ["amazing", "professional", "great"]


def test_ties_keep_keyword_order():
    """Test that equal counts stay in configured keyword order."""
    config = MappingProxyType({"demo": ("zeta", "alpha", "mid")})
    aggregator = CategoryAggregator(config)

    result = aggregator.aggregate(Counter({"alpha": 2, "zeta": 2, "mid": 3}))

    assert result["demo"] == (
        KeywordCount(word="mid", count=3),
        KeywordCount(word="zeta", count=2),
        KeywordCount(word="alpha", count=2),
    )


def test_config_override():
    aggregator = CategoryAggregator()
    result = aggregator.aggregate(Counter({"roof": 1}), {"roofing": ("roof",)})
    assert result == {"roofing": (KeywordCount(word="roof", count=1),)}


def test_multi_word_keyword_never_scores(aggregator):
    """A keyword with a space cannot appear inside a whitespace-split token."""
    result = aggregator.aggregate(Counter({"crawl": 3, "space": 3}))
    assert result["technical"] == ()


def test_keyword_count_is_case_insensitive():
    assert CategoryAggregator.keyword_count("Attic", {"attic": 2, "attics": 1}) == 3


def test_max_count():
    data = {
        "quality": (KeywordCount("great", 4),),
        "service": (KeywordCount("service", 7), KeywordCount("prompt", 1)),
        "technical": (),
    }
    assert max_count(data) == 7
    assert max_count({"quality": ()}) == 0


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
