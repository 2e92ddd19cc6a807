"""
Occurrence counting of candidate values across frames.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal


class CandidateTally:
    """
    Multiset of parsed candidate values for one field.

    Counts only grow until ``clear()``. The reported value is the mode; when
    several values share the highest count the smallest of them wins, so the
    result does not depend on insertion order.
    """

    def __init__(self, counts: dict[Decimal, int] | None = None):
        self._counts: Counter[Decimal] = Counter(counts or {})

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def add(self, value: Decimal) -> int:
        """Count one more occurrence of ``value`` and return its new count."""
        self._counts[value] += 1
        return self._counts[value]

    def count(self, value: Decimal) -> int:
        return self._counts.get(value, 0)

    def mode(self) -> Decimal | None:
        """Most frequent value, or None when nothing has been counted."""
        if not self._counts:
            return None
        best = max(self._counts.values())
        return min(value for value, n in self._counts.items() if n == best)

    def clear(self) -> None:
        self._counts.clear()

    def copy(self) -> CandidateTally:
        return CandidateTally(dict(self._counts))

    def as_dict(self) -> dict[Decimal, int]:
        return dict(self._counts)
