"""
Formatting of extracted fields for the on-screen/export sink.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from receipt_scanner.config import ExtractorConfig, get_config
from receipt_scanner.types import ExtractedFields

TOTAL_KEY = "TOTAL"
DATE_KEY = "Date"
GST_KEY = "GST"
PST_KEY = "PST"


def format_amount(amount: Decimal, places: int = 2) -> str:
    """Render ``amount`` with exactly ``places`` decimals, rounding half up."""
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, max(amount.adjusted(), 0) + places + 2)
        rounded = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_fields(
    fields: ExtractedFields, config: ExtractorConfig | None = None
) -> dict[str, str]:
    """
    Map the set fields to display strings keyed by sink field name.

    Unset fields are left out so the sink keeps whatever it shows.
    """
    config = config or get_config()
    places = config.total_decimal_places
    display: dict[str, str] = {}
    if fields.total is not None:
        display[TOTAL_KEY] = format_amount(fields.total, places)
    if fields.gst is not None:
        display[GST_KEY] = format_amount(fields.gst, places)
    if fields.pst is not None:
        display[PST_KEY] = format_amount(fields.pst, places)
    if fields.date is not None:
        display[DATE_KEY] = fields.date.strftime(config.date_output_format)
    return display
