"""
Dashboard Orchestrator.

Coordinates the review pipeline and holds the current dashboard state.
"""

import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Union

from src.agents.aggregation import CategoryAggregator, max_count
from src.agents.ingestion import ReviewIngestionAgent
from src.agents.selection import chart_data, filter_reviews, ranked_chart_series, summary_line
from src.agents.word_frequency import WordFrequencyCounter
from src.models.category import CategoryData, ChartEntry
from src.models.review import Review
from src.models.selection import SelectionState
from src.utils.spreadsheet import SpreadsheetReader
import config.settings as settings

logger = logging.getLogger(__name__)


def _empty_category_data() -> CategoryData:
    return {category: () for category in settings.CATEGORY_KEYWORDS}


@dataclass(frozen=True)
class DashboardData:
    """
    Everything derived from one ingested file.
    Replaced as a whole on every load; never updated in place.
    """
    reviews: tuple = ()
    word_frequencies: Counter = field(default_factory=Counter)
    category_data: CategoryData = field(default_factory=_empty_category_data)


class ReviewDashboard:
    """
    Runs the pipeline and answers display queries.

    Coordinates:
    1. Decode → 2. Ingest → 3. Count words → 4. Aggregate categories

    Derived data and selection are held as two separate values: loading a
    file replaces data, user clicks replace selection.
    """

    def __init__(
        self,
        reader: SpreadsheetReader = None,
        category_config: Mapping[str, Sequence[str]] = settings.CATEGORY_KEYWORDS
    ):
        """
        Initialize dashboard.

        Args:
            reader: Spreadsheet decoder (defaults to SpreadsheetReader)
            category_config: Category name -> keyword list
        """
        self.category_config = category_config

        self.reader = reader or SpreadsheetReader()
        self.ingestion_agent = ReviewIngestionAgent()
        self.word_counter = WordFrequencyCounter()
        self.aggregator = CategoryAggregator(category_config)

        self.data = DashboardData(
            category_data={category: () for category in category_config}
        )
        self.selection = SelectionState(categories=tuple(category_config))

    def load_file(self, path: Union[str, os.PathLike]) -> DashboardData:
        """
        Decode a workbook from disk and process it.

        Raises:
            SpreadsheetDecodeError: If the file cannot be decoded. Current
                data is left untouched.
        """
        logger.info(f"Loading reviews from {path}")
        rows = self.reader.read_file(path)
        return self.process_rows(rows)

    def load_bytes(self, data: bytes) -> DashboardData:
        """Same as load_file, for file contents already in memory."""
        rows = self.reader.read_bytes(data)
        return self.process_rows(rows)

    def process_rows(self, rows: Sequence[Mapping[str, Any]]) -> DashboardData:
        """
        Run ingestion, counting and aggregation over decoded rows.

        Args:
            rows: Row mappings from the spreadsheet decoder

        Returns:
            The newly installed DashboardData
        """
        reviews = self.ingestion_agent.ingest(rows)
        word_frequencies = self.word_counter.count(reviews)
        category_data = self.aggregator.aggregate(word_frequencies)

        # Single assignment: readers see either the old data or the new
        self.data = DashboardData(
            reviews=tuple(reviews),
            word_frequencies=word_frequencies,
            category_data=category_data
        )

        logger.info(
            f"Processed {len(reviews)} reviews: "
            f"{len(word_frequencies)} unique words, "
            f"{sum(len(scores) for scores in category_data.values())} scored keywords"
        )
        return self.data

    # Selection

    def select_category(self, category: str) -> SelectionState:
        """
        Raises:
            ValueError: If category is neither "all" nor configured
        """
        self.selection = self.selection.select_category(category)
        logger.debug(f"Selected category {category}")
        return self.selection

    def select_word(self, word: str) -> SelectionState:
        self.selection = self.selection.select_word(word)
        logger.debug(f"Selected word {word}")
        return self.selection

    def select_all(self) -> SelectionState:
        self.selection = self.selection.select_all()
        return self.selection

    # Display queries

    def chart_series(self) -> List[ChartEntry]:
        return ranked_chart_series(self.data.category_data)

    def chart_data(self, top_n: int = settings.CHART_TOP_N) -> List[ChartEntry]:
        return chart_data(self.data.category_data, top_n)

    def max_count(self) -> int:
        return max_count(self.data.category_data)

    def visible_reviews(self) -> List[Review]:
        return filter_reviews(self.data.reviews, self.selection, self.data.category_data)

    def summary(self) -> str:
        return summary_line(len(self.visible_reviews()), len(self.data.reviews))

    def category_summary(self) -> Dict[str, List[Dict[str, Any]]]:
        """Category data as plain dicts, for printing or JSON output."""
        return {
            category: [{"word": item.word, "count": item.count} for item in scores]
            for category, scores in self.data.category_data.items()
        }
