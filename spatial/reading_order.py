"""
Reading Order Module

Orders fragments top row first, then left to right within a row. Positions
within a tolerance compare equal so small OCR jitter does not reshuffle
fragments that belong to the same row or column.
"""
from functools import cmp_to_key
from typing import Callable, Sequence, Tuple

from core.models import TextFragment


def tolerant_compare(a: int, b: int, tolerance: int) -> int:
    """
    Compare two coordinates, treating close values as equal.

    Args:
        a: First coordinate
        b: Second coordinate
        tolerance: Maximum distance still considered equal

    Returns:
        0 if |a - b| <= tolerance, otherwise -1 or 1 by numeric order
    """
    if abs(a - b) <= tolerance:
        return 0
    return -1 if a < b else 1


def _tolerant_key(
    position: Callable[[TextFragment], int],
    tolerance: int
):
    return cmp_to_key(
        lambda first, second: tolerant_compare(position(first), position(second), tolerance)
    )


def sort_by_left(fragments: Sequence[TextFragment], tolerance: int) -> Tuple[TextFragment, ...]:
    """Stable sort on left edge with tolerant comparison."""
    return tuple(sorted(
        fragments,
        key=_tolerant_key(lambda f: f.bounding_box.left, tolerance)
    ))


def sort_by_top(fragments: Sequence[TextFragment], tolerance: int) -> Tuple[TextFragment, ...]:
    """Stable sort on top edge with tolerant comparison."""
    return tuple(sorted(
        fragments,
        key=_tolerant_key(lambda f: f.bounding_box.top, tolerance)
    ))


def get_reading_order(fragments: Sequence[TextFragment], tolerance: int) -> Tuple[TextFragment, ...]:
    """
    Approximate reading order insensitive to small jitter.

    Sorts by left edge, then stably by top edge, both tolerant.
    """
    return sort_by_top(sort_by_left(fragments, tolerance), tolerance)


def get_exact_order(fragments: Sequence[TextFragment]) -> Tuple[TextFragment, ...]:
    """Sort by left edge, then stably by top edge, without tolerance."""
    by_left = sorted(fragments, key=lambda f: f.bounding_box.left)
    return tuple(sorted(by_left, key=lambda f: f.bounding_box.top))
