"""
Receipt field extraction from per-frame OCR results.

Each frame is scanned block by block. Label blocks ("TOTAL", tax-rate lines)
pin an anchor at their vertical position, date blocks set the date, and the
remaining lines are attributed to whichever anchor they sit level with.
Totals are counted across frames and the most frequent reading is reported,
which smooths over transient misreads of a shaking camera feed.
"""

from __future__ import annotations

import logging
import threading
from decimal import Decimal

from receipt_scanner.config import ExtractorConfig, get_config
from receipt_scanner.parsing import (
    parse_abbrev_month_date,
    parse_amount,
    parse_numeric_date,
)
from receipt_scanner.patterns import (
    ABBREV_MONTH_DATE_PATTERN,
    label_pattern,
    tax_rate_pattern,
)
from receipt_scanner.tally import CandidateTally
from receipt_scanner.types import (
    ExtractedFields,
    FieldAnchor,
    FrameResult,
    TextBlock,
    TextLine,
)

logger = logging.getLogger(__name__)

TOTAL = "TOTAL"
GST = "GST"
PST = "PST"
ANCHOR_FIELDS = (TOTAL, GST, PST)


class FrameProcessingError(ValueError):
    """Raised when a frame is too malformed to classify."""


class ReceiptFieldExtractor:
    """
    Stateful classifier turning OCR frames into receipt fields.

    Anchors live for one frame only. The total tally and the extracted
    fields persist across frames until ``clear_accumulated_data()``.
    """

    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or get_config()
        self._total_pattern = label_pattern(self.config.total_label)
        self._rate_patterns = {
            GST: tax_rate_pattern(self.config.gst_rate),
            PST: tax_rate_pattern(self.config.pst_rate),
        }
        self._anchors = {name: FieldAnchor() for name in ANCHOR_FIELDS}
        self._tally = CandidateTally()
        self._fields = ExtractedFields()
        self._lock = threading.Lock()
        self.last_tax_lines: dict[str, list[str]] = {GST: [], PST: []}

    @property
    def fields(self) -> ExtractedFields:
        return self._fields

    @property
    def anchors(self) -> dict[str, FieldAnchor]:
        """Snapshot of the per-frame anchors."""
        return {
            name: FieldAnchor(anchor.y_mid, anchor.rect_height)
            for name, anchor in self._anchors.items()
        }

    @property
    def total_tally(self) -> dict[Decimal, int]:
        return self._tally.as_dict()

    def process(self, frame: FrameResult) -> ExtractedFields:
        """
        Classify every block of one frame and refresh the extracted fields.

        Args:
            frame: OCR result for a single camera frame

        Returns:
            The persistent ExtractedFields record, updated in place

        Raises:
            FrameProcessingError: If a block or line is missing its text or
                bounding box. State from earlier frames is left untouched.
        """
        with self._lock:
            tally = self._tally.copy()
            fields = self._fields.model_copy()
            tax_lines: dict[str, list[str]] = {GST: [], PST: []}
            try:
                for block in frame.blocks:
                    self._classify_block(block, tally, fields, tax_lines)
            except FrameProcessingError as e:
                logger.warning("Dropping malformed frame: %s", e)
                raise
            except (AttributeError, TypeError) as e:
                logger.warning("Dropping malformed frame: %s", e)
                raise FrameProcessingError(
                    f"Malformed OCR frame: {e}"
                ) from e
            finally:
                self._reset_anchors()

            self._tally = tally
            self._fields.update_from(fields)
            self.last_tax_lines = tax_lines
            return self._fields

    def clear_accumulated_data(self) -> None:
        """Forget all counted totals. Displayed fields are kept."""
        with self._lock:
            self._tally.clear()
        logger.info("Cleared accumulated receipt data")

    def _reset_anchors(self) -> None:
        for anchor in self._anchors.values():
            anchor.reset()

    def _classify_block(
        self,
        block: TextBlock,
        tally: CandidateTally,
        fields: ExtractedFields,
        tax_lines: dict[str, list[str]],
    ) -> None:
        text = _require_text(block)
        if self._total_pattern.match(text):
            self._capture_total_anchor(block)
        elif ABBREV_MONTH_DATE_PATTERN.match(text):
            date = parse_abbrev_month_date(text)
            if date is not None:
                logger.debug("Date from month name: %s", date)
                fields.date = date
        elif "/" in text:
            date = parse_numeric_date(text)
            if date is not None:
                logger.debug("Date from MM/DD/YYYY: %s", date)
                fields.date = date
        elif "%" in text:
            self._capture_rate_anchors(block)
        else:
            self._attribute_values(block, tally, fields, tax_lines)

    def _capture_total_anchor(self, block: TextBlock) -> None:
        for line in block.lines:
            if self._total_pattern.match(_require_text(line)):
                self._anchors[TOTAL].capture(line.bounding_box)
                logger.debug(
                    "TOTAL anchor at y=%.1f", self._anchors[TOTAL].y_mid
                )
                break

    def _capture_rate_anchors(self, block: TextBlock) -> None:
        for line in block.lines:
            text = _require_text(line)
            for name, pattern in self._rate_patterns.items():
                if pattern.search(text):
                    self._anchors[name].capture(line.bounding_box)
                    logger.debug(
                        "%s anchor at y=%.1f", name, self._anchors[name].y_mid
                    )

    def _attribute_values(
        self,
        block: TextBlock,
        tally: CandidateTally,
        fields: ExtractedFields,
        tax_lines: dict[str, list[str]],
    ) -> None:
        threshold = self.config.nearness_threshold
        for line in block.lines:
            text = _require_text(line)
            y_mid = line.bounding_box.mid_y
            if self._anchors[TOTAL].is_near(y_mid, threshold):
                amount = parse_amount(text)
                if amount is None or not amount.is_finite():
                    continue
                count = tally.add(amount)
                fields.total = tally.mode()
                logger.debug(
                    "Total candidate %s seen %d times, showing %s",
                    amount,
                    count,
                    fields.total,
                )
            else:
                # Tax amounts are not parsed yet, only the lines are kept.
                for name in (GST, PST):
                    if self._anchors[name].is_near(y_mid, threshold):
                        tax_lines[name].append(text)
                        break


def _require_text(region: TextBlock | TextLine) -> str:
    if region.text is None:
        raise FrameProcessingError(
            f"{type(region).__name__} has no text"
        )
    return region.text
