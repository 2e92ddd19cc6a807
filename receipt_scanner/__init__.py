"""
Receipt Scanner - receipt field extraction from live OCR frames.

This package turns per-frame OCR output (blocks -> lines -> elements with
bounding boxes) into receipt fields: the total, GST/PST tax line positions
and the transaction date. Totals are accumulated across frames and the most
frequent reading wins.

Example:
    ```python
    from receipt_scanner import ReceiptFieldExtractor, parse_frame_payload

    extractor = ReceiptFieldExtractor()
    fields = extractor.process(parse_frame_payload(ocr_json))
    print(fields.total, fields.date)
    ```
"""

from receipt_scanner.config import ExtractorConfig, get_config
from receipt_scanner.display import format_amount, format_fields
from receipt_scanner.extractor import (
    FrameProcessingError,
    ReceiptFieldExtractor,
)
from receipt_scanner.parsers import ParseError, parse_frame_payload
from receipt_scanner.processor import (
    FrameProcessor,
    TextRecognitionProcessor,
    TextRecognizer,
)
from receipt_scanner.session import ReceiptSession, VendorSelectionError
from receipt_scanner.tally import CandidateTally
from receipt_scanner.types import (
    BoundingBox,
    ExtractedFields,
    FieldAnchor,
    FrameResult,
    TextBlock,
    TextElement,
    TextLine,
)

__version__ = "0.1.0"

__all__ = [
    # Core extractor & config
    "ReceiptFieldExtractor",
    "CandidateTally",
    "ExtractorConfig",
    "get_config",
    # Typed models
    "BoundingBox",
    "TextElement",
    "TextLine",
    "TextBlock",
    "FrameResult",
    "FieldAnchor",
    "ExtractedFields",
    # Frame processing
    "FrameProcessor",
    "TextRecognizer",
    "TextRecognitionProcessor",
    "ReceiptSession",
    # Parsing & display
    "parse_frame_payload",
    "format_amount",
    "format_fields",
    # Errors
    "FrameProcessingError",
    "ParseError",
    "VendorSelectionError",
]
