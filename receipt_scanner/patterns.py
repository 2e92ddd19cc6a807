"""
Regular expressions used to classify recognized receipt text.
"""

import re

MONTH_ABBREVIATIONS = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}

# Month name, then a 1-2 digit day, then a 4 digit year, possibly across
# line breaks within the block.
ABBREV_MONTH_DATE_PATTERN = re.compile(
    r"(" + "|".join(MONTH_ABBREVIATIONS) + r")(.*?)(\d{1,2})(.*?)(\d{4})",
    re.DOTALL,
)

NUMERIC_DATE_PATTERN = re.compile(
    r"(.*?)((\d{1,2})/(\d{1,2})/(\d{4}))(.*)", re.DOTALL
)

# Plain decimal number after currency symbols and spaces are removed. Longer
# digit runs are barcodes or item codes, not amounts.
MAX_AMOUNT_DIGITS = 12
AMOUNT_PATTERN = re.compile(
    r"[+-]?(?:\d{1," + str(MAX_AMOUNT_DIGITS) + r"}(?:\.\d{0,4})?|\.\d{1,4})"
)


def label_pattern(label: str) -> re.Pattern[str]:
    """Case-insensitive pattern for ``label`` at the start of the text."""
    return re.compile(r"^" + re.escape(label), re.IGNORECASE)


def tax_rate_pattern(digit: int) -> re.Pattern[str]:
    """Pattern for a whole-number rate such as ``5%``, ``5.%`` or ``5.00%``.

    The digit may not be preceded by another digit or a decimal point, so
    ``15%`` and ``2.5%`` do not count as a 5% rate.
    """
    return re.compile(r"(?<![\d.])" + str(digit) + r"(?:\.0*)?%")

