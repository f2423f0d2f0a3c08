"""
Configuration settings for ReviewLens.

Centralized configuration for the review scoring pipeline.
"""

import os
from pathlib import Path
from types import MappingProxyType

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
LOG_FILE = PROJECT_ROOT / "reviewlens.log"

# Keyword categories (lowercase, definition order is the tie-break order)
CATEGORY_KEYWORDS = MappingProxyType({
    "quality": ("professional", "excellent", "quality", "great", "amazing", "fantastic"),
    "service": ("service", "helpful", "responsive", "courteous", "friendly", "prompt"),
    "technical": ("insulation", "attic", "foam", "crawl space", "installation", "spray"),
    "performance": ("temperature", "energy", "efficient", "comfort", "saving", "difference"),
})
ALL_CATEGORIES = "all"

# Review defaults
RATING_LABELS = ("ONE", "TWO", "THREE", "FOUR", "FIVE")
DEFAULT_RATING = "FIVE"
DEFAULT_REVIEWER = "Anonymous"

# Tokens shorter than this are never counted
MIN_TOKEN_LENGTH = 3

# Chart shows this many bars
CHART_TOP_N = 10

# Mis-decoded UTF-8 punctuation (read as cp1252) and its repair.
# Applied in order: specific artifacts before the bare "â€" prefix.
MOJIBAKE_REPLACEMENTS = (
    ("Â", ""),
    ("â€™", "'"),
    ("â€œ", '"'),
    ("â€¦", "..."),
    ("â€\u201d", "\u2014"),
    ("â€\x9d", '"'),
    ("â€", '"'),
)

# Spreadsheet input
SUPPORTED_EXTENSIONS = (".xlsx", ".xls")
SHEET_INDEX = 0  # First sheet only

# Logging
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVEL = os.getenv("REVIEWLENS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Notes:
#
# 1. CATEGORY_KEYWORDS is wrapped in MappingProxyType and holds tuples,
#    so neither the table nor a keyword list can be mutated at runtime.
#
# 2. "crawl space" contains a space and can never be found inside a single
#    whitespace-split token, so it never scores in the chart. It still
#    matches in the review filter, which searches the full text.
#
# 3. "Â" is removed first so that "Â" wedged inside an artifact cannot
#    survive one pass and be repaired on the next.
