"""
Text Normalization.

Repairs mis-decoded punctuation and collapses whitespace in raw
review text before it is stored or tokenized.
"""

import re
from typing import Optional

import config.settings as settings

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(raw: Optional[str]) -> str:
    """
    Clean a raw text field.

    Args:
        raw: Text as decoded from the spreadsheet, or None if the cell was empty

    Returns:
        Repaired text with single spaces and no leading/trailing whitespace.
        Empty string for None or blank input.
    """
    if not raw:
        return ""

    text = raw
    for artifact, replacement in settings.MOJIBAKE_REPLACEMENTS:
        text = text.replace(artifact, replacement)

    # \s also covers non-breaking spaces left behind by the "Â" removal
    return _WHITESPACE_RE.sub(" ", text).strip()


# Notes:
#
# 1. The replacement table is ordered. "â€" is a prefix of every other
#    quote artifact, so it must come last or the ellipsis and em-dash
#    repairs would never see their input.
#
# 2. normalize_text(normalize_text(s)) == normalize_text(s): no
#    replacement emits "â", "€" or "Â", and whitespace is collapsed last.
