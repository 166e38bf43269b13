"""Spatial analysis package - Line reconstruction from OCR fragments."""

from .filters import (
    is_in_band,
    is_noise,
    filter_band_noise,
    filter_columns,
    filter_unknown_words,
)

from .reading_order import (
    tolerant_compare,
    sort_by_left,
    sort_by_top,
    get_reading_order,
    get_exact_order,
)

from .grouping import (
    try_merge,
    merge_adjacent_fragments,
)

from .line_reconstruction import (
    ReconstructionResult,
    LineReconstructor,
    select_profile,
)

__all__ = [
    # Filters
    'is_in_band',
    'is_noise',
    'filter_band_noise',
    'filter_columns',
    'filter_unknown_words',

    # Reading order
    'tolerant_compare',
    'sort_by_left',
    'sort_by_top',
    'get_reading_order',
    'get_exact_order',

    # Grouping
    'try_merge',
    'merge_adjacent_fragments',

    # Pipeline
    'ReconstructionResult',
    'LineReconstructor',
    'select_profile',
]
