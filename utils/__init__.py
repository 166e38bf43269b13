"""Utilities package - Helper functions for geometry, text and images."""

from .bbox_utils import (
    within_tolerance,
    near_any,
    horizontal_gap,
    vertical_offset,
    compute_crop_region,
    format_fragment,
)

from .text_utils import (
    is_punctuation,
    split_words,
    is_boilerplate,
    join_descriptions,
)

from .image_utils import (
    scaled_size,
    crop_and_scale,
)

__all__ = [
    # BBox utils
    'within_tolerance',
    'near_any',
    'horizontal_gap',
    'vertical_offset',
    'compute_crop_region',
    'format_fragment',

    # Text utils
    'is_punctuation',
    'split_words',
    'is_boilerplate',
    'join_descriptions',

    # Image utils
    'scaled_size',
    'crop_and_scale',
]
