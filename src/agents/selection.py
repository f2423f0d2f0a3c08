"""
Display Selector.

Derives the chart series and the visible review list from the current
derived data and selection. Both derivations are pure functions.
"""

from typing import List, Sequence

from src.models.category import CategoryData, ChartEntry
from src.models.review import Review
from src.models.selection import SelectionState
import config.settings as settings


def ranked_chart_series(category_data: CategoryData) -> List[ChartEntry]:
    """
    Flatten all categories into one list ranked by count.

    Entries with equal counts keep category order, then keyword order,
    so slicing the first N always yields the N highest counts.
    """
    entries = [
        ChartEntry(word=item.word, count=item.count, category=category)
        for category, scores in category_data.items()
        for item in scores
    ]
    return sorted(entries, key=lambda entry: entry.count, reverse=True)


def chart_data(category_data: CategoryData, top_n: int = settings.CHART_TOP_N) -> List[ChartEntry]:
    """The bars the chart actually shows."""
    return ranked_chart_series(category_data)[:top_n]


def filter_reviews(
    reviews: Sequence[Review],
    selection: SelectionState,
    category_data: CategoryData
) -> List[Review]:
    """
    Select the reviews to display.

    A selected word wins over a selected category. With neither set, every
    review is returned in original order.

    Args:
        reviews: All ingested reviews
        selection: Current selection state
        category_data: Scored keywords per category; only keywords that
            scored (count > 0) are used for the category filter

    Returns:
        Matching reviews in original order
    """
    if selection.word:
        word = selection.word.lower()
        return [review for review in reviews if word in review.text.lower()]

    if selection.category != settings.ALL_CATEGORIES:
        keywords = [item.word.lower() for item in category_data.get(selection.category, ())]
        return [
            review for review in reviews
            if any(keyword in review.text.lower() for keyword in keywords)
        ]

    return list(reviews)


def summary_line(visible: int, total: int) -> str:
    return f"Showing {visible} of {total} reviews"
