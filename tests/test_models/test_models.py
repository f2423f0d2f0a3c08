"""
Basic unit tests for the data models.
"""

import dataclasses

import pytest
from src.models.category import ChartEntry
from src.models.review import Review, stars_for_rating
from src.models.selection import SelectionState


@pytest.mark.parametrize("rating, stars", [
    ("ONE", 1), ("TWO", 2), ("THREE", 3), ("FOUR", 4), ("FIVE", 5),
    ("SIX", 1), ("", 1), ("five", 1),
])
def test_star_mapping(rating, stars):
    assert stars_for_rating(rating) == stars


def test_review_stars_property():
    review = Review(rating="FOUR", text="ok", date="", reviewer="Anonymous")
    assert review.stars == 4


def test_review_is_immutable():
    review = Review(rating="FIVE", text="ok", date="", reviewer="Anonymous")
    with pytest.raises(dataclasses.FrozenInstanceError):
        review.text = "changed"


def test_chart_entry_to_dict():
    entry = ChartEntry(word="foam", count=3, category="technical")
    assert entry.to_dict() == {"word": "foam", "count": 3, "category": "technical"}


def test_selection_default_is_all():
    selection = SelectionState()
    assert selection.category == "all"
    assert selection.word is None
    assert selection.mode == "all"


def test_selection_invalid_category():
    """Test that unknown categories are rejected."""
    with pytest.raises(ValueError):
        SelectionState(category="pricing")

    with pytest.raises(ValueError):
        SelectionState().select_category("pricing")


def test_select_word_keeps_category():
    selection = SelectionState().select_category("quality").select_word("service")

    assert selection.category == "quality"
    assert selection.word == "service"
    assert selection.mode == "word"


def test_select_category_clears_word():
    selection = SelectionState().select_word("foam").select_category("technical")

    assert selection == SelectionState(category="technical")
    assert selection.mode == "category"


def test_select_all_clears_both():
    selection = SelectionState(category="service", word="prompt").select_all()
    assert selection == SelectionState()

    assert SelectionState(word="foam").select_category("all") == SelectionState()


def test_select_blank_word_clears_word():
    selection = SelectionState(category="service", word="prompt").select_word("  ")
    assert selection == SelectionState(category="service")


def test_transitions_return_new_instances():
    original = SelectionState()
    updated = original.select_category("performance")

    assert original == SelectionState()
    assert updated is not original


def test_selection_with_custom_categories():
    selection = SelectionState(categories=("roofing",))

    assert selection.select_category("roofing").category == "roofing"
    assert selection.select_category("roofing").select_all().categories == ("roofing",)
    with pytest.raises(ValueError):
        selection.select_category("quality")


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
