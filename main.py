"""
ReviewLens - Review Keyword Dashboard

CLI entry point for scoring a review spreadsheet.
"""

import argparse
import logging
import sys

import pandas as pd

from src.orchestrator import ReviewDashboard
from src.utils.spreadsheet import SpreadsheetDecodeError
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """argparse type for counts where 0 is allowed."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ReviewLens - Review Keyword Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Chart and full review list
  python main.py reviews.xlsx

  # Only reviews matching the technical keywords
  python main.py reviews.xlsx --category technical

  # Only reviews mentioning "foam" (overrides --category)
  python main.py reviews.xlsx --word foam --limit 20
        """
    )

    parser.add_argument(
        "file",
        help="Review spreadsheet (.xlsx or .xls) with Rating, Review Text, Date, Reviewer columns"
    )

    parser.add_argument(
        "--category",
        default=settings.ALL_CATEGORIES,
        choices=[settings.ALL_CATEGORIES] + list(settings.CATEGORY_KEYWORDS),
        help="Filter reviews by keyword category (default: all)"
    )

    parser.add_argument(
        "--word",
        help="Filter reviews containing this word (takes precedence over --category)"
    )

    parser.add_argument(
        "--top-n",
        type=positive_int,
        default=settings.CHART_TOP_N,
        help=f"Number of chart bars (default: {settings.CHART_TOP_N})"
    )

    parser.add_argument(
        "--top-words",
        type=non_negative_int,
        default=0,
        help="Also print the N most frequent words overall (default: off)"
    )

    parser.add_argument(
        "--limit",
        type=non_negative_int,
        help="Print at most this many reviews (default: all)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=settings.LOG_LEVELS,
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse arguments, also checking the log level default taken from the environment."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    if args.log_level not in settings.LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} "
            f"(choose from {', '.join(settings.LOG_LEVELS)})"
        )

    return args


def print_chart(dashboard: ReviewDashboard, top_n: int):
    print("Word Frequency Chart")
    print("-" * 60)

    entries = dashboard.chart_data(top_n)
    if not entries:
        print("(no keyword matches)")
        return

    df = pd.DataFrame([entry.to_dict() for entry in entries])
    width = 30
    peak = dashboard.max_count()
    df["bar"] = df["count"].map(lambda count: "█" * max(1, round(width * count / peak)))
    print(df.to_string(index=False))


def print_top_words(dashboard: ReviewDashboard, n: int):
    print(f"Top {n} Words")
    print("-" * 60)
    top = dashboard.word_counter.most_common(dashboard.data.word_frequencies, n)
    if not top:
        print("(no words)")
        return
    print(pd.DataFrame(top, columns=["word", "count"]).to_string(index=False))


def print_reviews(dashboard: ReviewDashboard, limit: int = None):
    visible = dashboard.visible_reviews()

    print("Reviews")
    print("-" * 60)
    print(dashboard.summary())
    print()

    for review in visible[:limit] if limit is not None else visible:
        print(f"{'★' * review.stars:<5}  {review.date}")
        print(f"  {review.text}")
        print(f"  - {review.reviewer}")
        print()


def main():
    """Main CLI entry point."""
    args = parse_args()

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Print banner
    print("=" * 60)
    print("ReviewLens - Review Keyword Dashboard")
    print("=" * 60)
    print(f"File: {args.file}")
    print(f"Category: {args.category}")
    if args.word:
        print(f"Word: {args.word}")
    print("=" * 60)
    print()

    dashboard = ReviewDashboard()

    try:
        dashboard.load_file(args.file)
    except SpreadsheetDecodeError as e:
        logger.error(f"Could not load {args.file}: {e}")
        print(f"\n❌ Could not load reviews: {e}")
        sys.exit(1)

    dashboard.select_category(args.category)
    if args.word:
        dashboard.select_word(args.word)

    print_chart(dashboard, args.top_n)
    print()

    if args.top_words > 0:
        print_top_words(dashboard, args.top_words)
        print()

    print_reviews(dashboard, args.limit)

    logger.info("ReviewLens completed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
