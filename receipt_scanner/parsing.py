"""
Tolerant parsers for amounts and dates read off a receipt.

Every parser returns ``None`` on a miss. OCR of a live camera feed misreads
often, so a miss is expected and the caller simply skips the update.
"""

import datetime as dt
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from dateutil.relativedelta import relativedelta

from receipt_scanner.patterns import (
    ABBREV_MONTH_DATE_PATTERN,
    AMOUNT_PATTERN,
    MONTH_ABBREVIATIONS,
    NUMERIC_DATE_PATTERN,
)

logger = logging.getLogger(__name__)


def normalize_amount_text(raw: str) -> str:
    """
    Strip currency symbols and whitespace and settle the decimal separator.

    A lone comma followed by one or two digits is a decimal comma
    (``12,99``). When both separators appear, the right-most one is the
    decimal point and the other is a thousands separator
    (``1,234.56`` and ``1.234,56``). Any other comma groups thousands.
    """
    text = "".join(raw.replace("$", "").split())
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif "," in text:
        head, _, tail = text.rpartition(",")
        if text.count(",") == 1 and 1 <= len(tail) <= 2:
            text = f"{head}.{tail}"
        else:
            text = text.replace(",", "")
    return text


def parse_amount(raw: str) -> Optional[Decimal]:
    """
    Parse a money amount such as ``"$ 1,234.56"`` into a Decimal.

    Args:
        raw: Line text read next to a label

    Returns:
        The parsed amount, or None if the text is not a plain number
    """
    text = normalize_amount_text(raw)
    if not AMOUNT_PATTERN.fullmatch(text):
        logger.debug("Not an amount: %r", raw)
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        logger.debug("Not an amount: %r", raw)
        return None


def rollover_date(year: int, month: int, day: int) -> dt.date:
    """
    Build a date, carrying an out-of-range day or month into the next unit.

    ``Feb 30 2024`` becomes ``Mar 1 2024`` and day 0 becomes the last day of
    the previous month. Month 13 is January of the following year. Years are
    clamped to the range ``datetime`` supports.
    """
    year = min(max(year, dt.MINYEAR), dt.MAXYEAR)
    try:
        return dt.date(year, month, day)
    except ValueError:
        pass
    first = dt.date(year, 1, 1)
    try:
        return first + relativedelta(months=month - 1, days=day - 1)
    except (OverflowError, ValueError):
        return dt.date.max if year == dt.MAXYEAR else dt.date.min


def parse_abbrev_month_date(text: str) -> Optional[dt.date]:
    """
    Parse a block starting with an abbreviated month, e.g. ``"Feb 14\\n2024"``.

    Invalid day/month combinations never raise; they roll over instead.
    """
    match = ABBREV_MONTH_DATE_PATTERN.match(text)
    if not match:
        return None
    month = MONTH_ABBREVIATIONS.get(match.group(1))
    if month is None:
        logger.debug("Unknown month abbreviation: %r", match.group(1))
        return None
    day = int(match.group(3))
    year = int(match.group(5))
    return rollover_date(year, month, day)


def parse_numeric_date(text: str) -> Optional[dt.date]:
    """
    Parse the first ``MM/DD/YYYY`` date found anywhere in ``text``.

    Leading zeros are optional. Impossible dates roll over like month-name
    dates do, so ``02/30/2024`` becomes ``03/01/2024``.
    """
    match = NUMERIC_DATE_PATTERN.fullmatch(text)
    if not match:
        return None
    month, day, year = (int(match.group(i)) for i in (3, 4, 5))
    return rollover_date(year, month, day)
