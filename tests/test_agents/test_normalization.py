"""
Unit tests for text normalization.
"""

import pytest
from src.agents.normalization import normalize_text


def test_none_and_empty():
    """Test that missing text becomes an empty string."""
    assert normalize_text(None) == ""
    assert normalize_text("") == ""
    assert normalize_text("   \n\t ") == ""


@pytest.mark.parametrize("raw, expected", [
    ("Donâ€™t wait", "Don't wait"),
    ("â€œGreatâ€\u009d", '"Great"'),
    ("â€œGreatâ€", '"Great"'),
    ("and thenâ€¦", "and then..."),
    ("fast â€\u201d clean", "fast \u2014 clean"),
    ("priceÂ\u00a0was fair", "price was fair"),
    ("priceÂ was fair", "price was fair"),
])
def test_mojibake_repair(raw, expected):
    """Test repair of mis-decoded punctuation."""
    assert normalize_text(raw) == expected


def test_whitespace_collapsed_and_trimmed():
    text = "  Great \n\n job,\tvery   tidy  "
    assert normalize_text(text) == "Great job, very tidy"


def test_plain_text_unchanged():
    text = "Excellent service and quality"
    assert normalize_text(text) == text


@pytest.mark.parametrize("raw", [
    "",
    "  plain  text ",
    "â€™â€œâ€¦â€”Â",
    "âÂ€™ wedged marker",
    "tabs\tand\nnewlinesÂ Â here",
])
def test_idempotent(raw):
    """Test that normalizing twice changes nothing."""
    once = normalize_text(raw)
    assert normalize_text(once) == once


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
