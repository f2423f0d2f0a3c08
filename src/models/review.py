"""
Review data model.

Represents a canonical review produced by the ingestion agent.
"""

from dataclasses import dataclass

import config.settings as settings

_STAR_COUNTS = {label: stars for stars, label in enumerate(settings.RATING_LABELS, start=1)}


def stars_for_rating(rating: str) -> int:
    """Map a rating label to a 1-5 star count. Unknown labels get 1 star."""
    return _STAR_COUNTS.get(rating, 1)


@dataclass(frozen=True)
class Review:
    """
    Canonical review record.
    All fields are already cleaned and defaulted by the ingestion agent.
    """
    rating: str  # "ONE".."FIVE"
    text: str  # Normalized review text, may be empty
    date: str  # YYYY-MM-DD format, or "" if unknown
    reviewer: str  # Display name

    @property
    def stars(self) -> int:
        return stars_for_rating(self.rating)


# Notes:
#
# 1. Review is frozen. Filtering hands out the same instances the
#    dashboard holds, so callers must not be able to edit them.
#
# 2. rating stays a label rather than an int because the label is what
#    the spreadsheet carries and what the list view prints.
