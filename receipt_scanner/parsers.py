"""
Parser for raw OCR payloads.

Turns the JSON-like dict produced by an OCR engine binding into a validated
FrameResult, with proper error handling.
"""

import logging
from typing import Any

from pydantic import ValidationError

from receipt_scanner.types import FrameResult

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when an OCR payload cannot be turned into a frame."""


def parse_frame_payload(payload: dict[str, Any]) -> FrameResult:
    """
    Parse an OCR payload of blocks -> lines -> elements into a FrameResult.

    Expected shape::

        {"blocks": [{"text": ..., "bounding_box": {"left": ..., "top": ...,
          "right": ..., "bottom": ...}, "lines": [{"text": ...,
          "bounding_box": ..., "elements": [...]}]}]}

    ``text`` and ``bounding_box`` may be omitted on lines and blocks and are
    then derived from their children.

    Args:
        payload: Raw dict from the OCR engine

    Returns:
        Validated FrameResult

    Raises:
        ParseError: If the payload does not describe a valid frame
    """
    if not isinstance(payload, dict):
        raise ParseError(
            f"OCR payload must be a dict, got {type(payload).__name__}"
        )
    try:
        frame = FrameResult.model_validate(payload)
    except ValidationError as e:
        raise ParseError(f"Failed to parse OCR frame: {e}") from e

    logger.debug("Parsed OCR frame with %d blocks", len(frame.blocks))
    return frame
