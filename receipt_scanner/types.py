"""
Typed models for on-device OCR output and the receipt fields extracted from it.

The OCR engine reports a tree of blocks -> lines -> elements, each carrying
its text and a bounding box in one frame-relative coordinate space. Heights
are computed as ``top - bottom`` and midpoints as ``(top + bottom) / 2``, so
the math holds whichever way the source orients its vertical axis.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BoundingBox(BaseModel):
    """Axis-aligned rectangle in OCR coordinates."""

    model_config = ConfigDict(frozen=True)

    left: float
    top: float
    right: float
    bottom: float

    @property
    def height(self) -> float:
        """Signed height, ``top - bottom``."""
        return self.top - self.bottom

    @property
    def mid_y(self) -> float:
        """Vertical midpoint of the box."""
        return (self.top + self.bottom) / 2.0

    def union(self, other: BoundingBox) -> BoundingBox:
        """Smallest box covering both boxes, keeping this box's orientation."""
        if self.top >= self.bottom:
            top = max(self.top, other.top)
            bottom = min(self.bottom, other.bottom)
        else:
            top = min(self.top, other.top)
            bottom = max(self.bottom, other.bottom)
        return BoundingBox(
            left=min(self.left, other.left),
            top=top,
            right=max(self.right, other.right),
            bottom=bottom,
        )


def _union_all(boxes: list[BoundingBox]) -> BoundingBox | None:
    result = None
    for box in boxes:
        result = box if result is None else result.union(box)
    return result


def _derive_from_children(
    data: Any, children_key: str, separator: str
) -> Any:
    """Fill in missing ``text``/``bounding_box`` from child regions."""
    if not isinstance(data, dict):
        return data
    children = data.get(children_key) or []
    if not children:
        return data

    def _get(child: Any, name: str) -> Any:
        if isinstance(child, dict):
            return child.get(name)
        return getattr(child, name, None)

    data = dict(data)
    if "text" not in data:
        texts = [_get(child, "text") for child in children]
        if all(isinstance(text, str) for text in texts):
            data["text"] = separator.join(texts)
    if "bounding_box" not in data:
        boxes = [
            BoundingBox.model_validate(_get(child, "bounding_box"))
            for child in children
            if _get(child, "bounding_box") is not None
        ]
        box = _union_all(boxes)
        if box is not None:
            data["bounding_box"] = box
    return data


class TextElement(BaseModel):
    """Atomic recognized token."""

    text: str
    bounding_box: BoundingBox


class TextLine(BaseModel):
    """One visual line of elements.

    ``text`` and ``bounding_box`` default to the space-joined element text
    and the union of the element boxes when not supplied.
    """

    text: str
    bounding_box: BoundingBox
    elements: list[TextElement] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def derive_missing_fields(cls, data: Any) -> Any:
        """Derive text and bounding box from the elements if absent."""
        return _derive_from_children(data, "elements", " ")

    @classmethod
    def from_elements(cls, elements: list[TextElement]) -> TextLine:
        """Build a line whose text and box come from its elements."""
        return cls.model_validate({"elements": elements})


class TextBlock(BaseModel):
    """Group of lines as segmented by the OCR engine."""

    text: str
    bounding_box: BoundingBox
    lines: list[TextLine] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def derive_missing_fields(cls, data: Any) -> Any:
        """Derive text and bounding box from the lines if absent."""
        if isinstance(data, dict) and data.get("lines"):
            lines = [
                _derive_from_children(line, "elements", " ")
                for line in data["lines"]
            ]
            data = {**data, "lines": lines}
        return _derive_from_children(data, "lines", "\n")

    @classmethod
    def from_lines(cls, lines: list[TextLine]) -> TextBlock:
        """Build a block whose text and box come from its lines."""
        return cls.model_validate({"lines": lines})


class FrameResult(BaseModel):
    """All text blocks recognized in one camera frame."""

    blocks: list[TextBlock] = Field(default_factory=list)


@dataclass
class FieldAnchor:
    """Screen position of a label line for the frame being processed.

    Both values are ``None`` while unset, which makes every nearness check
    fail.
    """

    y_mid: float | None = None
    rect_height: float | None = None

    @property
    def is_set(self) -> bool:
        return self.y_mid is not None

    def capture(self, box: BoundingBox) -> None:
        self.y_mid = box.mid_y
        self.rect_height = box.height

    def reset(self) -> None:
        self.y_mid = None
        self.rect_height = None

    def is_near(self, y: float, threshold: float) -> bool:
        """Whether ``y`` lies strictly within ``threshold`` of the anchor."""
        if self.y_mid is None:
            return False
        return abs(y - self.y_mid) < threshold


class ExtractedFields(BaseModel):
    """Current best-guess receipt fields, overwritten as frames arrive."""

    model_config = ConfigDict(validate_assignment=True)

    total: Decimal | None = None
    gst: Decimal | None = None
    pst: Decimal | None = None
    date: dt.date | None = None

    def update_from(self, other: ExtractedFields) -> None:
        """Overwrite this record in place with the values of ``other``."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(other, name))
