"""
Bounding box utilities for label extraction.

Handles tolerance checks, gaps between fragments and crop placement.
"""
from typing import Iterable

from core.models import BoundingBox, CropRegion, CropWindow, TextFragment


def within_tolerance(a: int, b: int, tolerance: int) -> bool:
    """Check whether two coordinates are at most `tolerance` apart."""
    return abs(a - b) <= tolerance


def near_any(value: int, targets: Iterable[int], tolerance: int) -> bool:
    """
    Check whether a coordinate lies near at least one target.

    Args:
        value: Coordinate to test
        targets: Expected coordinates (bands or column ends)
        tolerance: Maximum allowed distance

    Returns:
        True if any target is within tolerance
    """
    return any(within_tolerance(value, target, tolerance) for target in targets)


def horizontal_gap(first: BoundingBox, second: BoundingBox) -> int:
    """Distance from the right edge of `first` to the left edge of `second`."""
    return abs(second.left - first.right)


def vertical_offset(first: BoundingBox, second: BoundingBox) -> int:
    """Distance between the tops of two boxes."""
    return abs(first.top - second.top)


def compute_crop_region(box: BoundingBox, window: CropWindow) -> CropRegion:
    """
    Place a fixed-size crop window relative to a box.

    The window is anchored at (right - x_offset, bottom - y_offset), so the
    origin can be negative for boxes close to the image edge.

    Args:
        box: Bounding box of the extracted value
        window: Crop window dimensions and offsets

    Returns:
        CropRegion in source-image pixels
    """
    return CropRegion(
        width=window.width,
        height=window.height,
        x=box.right - window.x_offset,
        y=box.bottom - window.y_offset,
    )


def format_fragment(fragment: TextFragment) -> str:
    """Render a fragment as a fixed-width diagnostic line."""
    box = fragment.bounding_box
    return (
        f"{fragment.description:25} "
        f"({box.left:4}, {box.top:4}) ({box.right:4}, {box.bottom:4})"
    )
