"""Builders for OCR frames used across the test suite.

Lines are built around a vertical midpoint with ``top < bottom`` (y grows
downward), the way the camera overlay reports boxes.
"""

from receipt_scanner.types import BoundingBox, FrameResult, TextBlock, TextLine


def line_at(
    text: str, y_mid: float, height: float = 10.0, left: float = 0.0
) -> TextLine:
    """Single line whose box is centred on ``y_mid``."""
    return TextLine(
        text=text,
        bounding_box=BoundingBox(
            left=left,
            top=y_mid - height / 2,
            right=left + 10.0 * max(len(text), 1),
            bottom=y_mid + height / 2,
        ),
    )


def block_of(*lines: TextLine) -> TextBlock:
    return TextBlock.from_lines(list(lines))


def total_frame(
    value_text: str, total_y: float = 100.0, value_y: float = 100.0
) -> FrameResult:
    """Frame with a TOTAL label block followed by one value block."""
    return FrameResult(
        blocks=[
            block_of(line_at("TOTAL", total_y)),
            block_of(line_at(value_text, value_y, left=300.0)),
        ]
    )
