"""
Ingestion Agent.

Maps loosely-typed spreadsheet rows into canonical Review records.
"""

import logging
import numbers
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from src.agents.normalization import normalize_text
from src.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)

# Canonical field name -> lookup key (lowercase, trimmed)
RATING_KEY = "rating"
TEXT_KEY = "review text"
DATE_KEY = "date"
REVIEWER_KEY = "reviewer"

# Excel stores dates as days since this epoch
EXCEL_EPOCH = "1899-12-30"


def _is_missing(value: Any) -> bool:
    """True for absent cells: None, NaN, NaT and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Array-like cell values; treat as present
        return False


class ReviewIngestionAgent:
    """
    Converts raw spreadsheet rows into Review objects.

    Rows come from the spreadsheet reader (or any other decoder) as plain
    mappings of column name to cell value. Every field is optional; each
    one independently falls back to its default, and no row is dropped.
    """

    def __init__(
        self,
        default_rating: str = settings.DEFAULT_RATING,
        default_reviewer: str = settings.DEFAULT_REVIEWER
    ):
        """
        Initialize ingestion agent.

        Args:
            default_rating: Rating label used when a row has none or an unknown one
            default_reviewer: Reviewer name used when a row has none
        """
        self.default_rating = default_rating
        self.default_reviewer = default_reviewer

    def ingest(self, rows: Sequence[Mapping[str, Any]]) -> List[Review]:
        """
        Convert raw rows into reviews.

        Args:
            rows: Row mappings in spreadsheet order

        Returns:
            One Review per row, same order
        """
        reviews = [self._to_review(row) for row in rows]

        logger.info(f"Ingested {len(reviews)} reviews")
        return reviews

    def _to_review(self, row: Mapping[str, Any]) -> Review:
        fields = self._canonical_keys(row)

        return Review(
            rating=self._parse_rating(fields.get(RATING_KEY)),
            text=self._parse_text(fields.get(TEXT_KEY)),
            date=self._parse_date(fields.get(DATE_KEY)),
            reviewer=self._parse_reviewer(fields.get(REVIEWER_KEY))
        )

    @staticmethod
    def _canonical_keys(row: Mapping[str, Any]) -> Dict[str, Any]:
        """Lowercase and trim column names; drop missing cells."""
        fields = {}
        for key, value in row.items():
            if _is_missing(value):
                continue
            fields[str(key).strip().lower()] = value
        return fields

    def _parse_rating(self, value: Any) -> str:
        """
        Accept a rating label ("FOUR", "four") or a number 1-5.
        Anything else falls back to the default rating.
        """
        if value is None:
            return self.default_rating

        label = str(value).strip().upper()
        if label in settings.RATING_LABELS:
            return label

        try:
            number = float(label)
        except ValueError:
            number = None

        if number is not None and number.is_integer() and 1 <= number <= len(settings.RATING_LABELS):
            return settings.RATING_LABELS[int(number) - 1]

        logger.debug(f"Unrecognized rating {value!r}, using {self.default_rating}")
        return self.default_rating

    @staticmethod
    def _parse_text(value: Any) -> str:
        if value is None:
            return ""
        return normalize_text(str(value))

    @staticmethod
    def _parse_date(value: Any) -> str:
        """
        Format a cell value as YYYY-MM-DD.

        Handles datetime/date objects and pandas Timestamps directly,
        numbers as Excel serial dates, and strings via pandas parsing.
        Returns "" for anything that cannot be parsed.
        """
        if value is None:
            return ""

        if isinstance(value, (datetime, date)):
            return value.strftime("%Y-%m-%d")

        try:
            if isinstance(value, numbers.Real) and not isinstance(value, bool):
                parsed = pd.to_datetime(value, unit="D", origin=EXCEL_EPOCH, errors="coerce")
            else:
                parsed = pd.to_datetime(str(value).strip(), errors="coerce")
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Unparseable date {value!r}: {e}")
            return ""

        if pd.isna(parsed):
            logger.debug(f"Unparseable date {value!r}")
            return ""

        return parsed.strftime("%Y-%m-%d")

    def _parse_reviewer(self, value: Any) -> str:
        if value is None:
            return self.default_reviewer
        return str(value).strip() or self.default_reviewer


# Notes:
#
# 1. Column names are matched case-insensitively with surrounding
#    whitespace ignored ("review text", " Review Text " both work).
#
# 2. pandas hands empty cells over as NaN/NaT, so _is_missing treats
#    those the same as an absent key.
#
# 3. A date like "2023-02-10" is parsed without timezone and formatted
#    back unchanged; no UTC shift is applied.
