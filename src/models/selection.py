"""
Selection state model.

Tracks which category or word the user picked to filter the review list.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import config.settings as settings


@dataclass(frozen=True)
class SelectionState:
    """
    Current filter selection.

    States:
    - all: category == "all" and no word
    - category: category set, no word
    - word: word set (category keeps whatever was stored before)

    Transitions return a new state; the instance itself never changes.
    """
    category: str = settings.ALL_CATEGORIES
    word: Optional[str] = None
    categories: Tuple[str, ...] = field(
        default=tuple(settings.CATEGORY_KEYWORDS), compare=False, repr=False
    )  # Selectable category names

    def __post_init__(self):
        # Validate category
        if self.category != settings.ALL_CATEGORIES and self.category not in self.categories:
            raise ValueError(
                f"Invalid category: {self.category}. Must be 'all' or one of "
                f"{', '.join(self.categories)}"
            )

    def select_category(self, category: str) -> "SelectionState":
        """Switch to a category (or "all"). Clears any selected word."""
        return replace(self, category=category, word=None)

    def select_word(self, word: Optional[str]) -> "SelectionState":
        """Select a word. The stored category is kept but no longer used for matching."""
        word = word.strip() if word else None
        return replace(self, word=word or None)

    def select_all(self) -> "SelectionState":
        """Clear both category and word."""
        return replace(self, category=settings.ALL_CATEGORIES, word=None)

    @property
    def mode(self) -> str:
        """Which filter is active: "word", "category" or "all"."""
        if self.word:
            return "word"
        if self.category != settings.ALL_CATEGORIES:
            return "category"
        return "all"
