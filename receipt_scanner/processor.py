"""
Frame processors fed by the camera pipeline.

A processor receives one image per delivered frame and tears down its
resources on ``stop()``. The text recognition processor runs a black-box OCR
engine, hands the result to a ReceiptFieldExtractor and pushes the display
strings into an output sink.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable

from receipt_scanner.display import format_fields
from receipt_scanner.extractor import FrameProcessingError, ReceiptFieldExtractor
from receipt_scanner.types import ExtractedFields, FrameResult

logger = logging.getLogger(__name__)


@runtime_checkable
class FrameProcessor(Protocol):
    """Anything that can consume camera frames."""

    def on_frame(self, image: Any) -> Any: ...

    def stop(self) -> None: ...


@runtime_checkable
class TextRecognizer(Protocol):
    """On-device OCR engine: image in, text region tree out."""

    def recognize(self, image: Any) -> FrameResult: ...

    def close(self) -> None: ...


class TextRecognitionProcessor:
    """Runs OCR on each frame and publishes the extracted receipt fields."""

    def __init__(
        self,
        recognizer: TextRecognizer,
        extractor: ReceiptFieldExtractor | None = None,
        sink: MutableMapping[str, str] | None = None,
    ):
        """
        Args:
            recognizer: OCR engine producing a FrameResult per image
            extractor: Field extractor; a default one is created if omitted
            sink: Display mapping updated with formatted field values
        """
        self.recognizer = recognizer
        self.extractor = extractor or ReceiptFieldExtractor()
        self.sink: MutableMapping[str, str] = sink if sink is not None else {}

    def on_frame(self, image: Any) -> ExtractedFields | None:
        """
        Process one camera frame.

        Returns:
            The updated fields, or None if recognition or extraction failed
            for this frame
        """
        try:
            frame = self.recognizer.recognize(image)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Text detection failed: %s", e)
            return None

        try:
            fields = self.extractor.process(frame)
        except FrameProcessingError as e:
            logger.warning("Text extraction failed: %s", e)
            return None

        self.sink.update(format_fields(fields, self.extractor.config))
        return fields

    def clear_accumulated_data(self) -> None:
        self.extractor.clear_accumulated_data()

    def stop(self) -> None:
        """Release the OCR engine."""
        try:
            self.recognizer.close()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error(
                "Exception thrown while trying to close text recognizer: %s", e
            )
