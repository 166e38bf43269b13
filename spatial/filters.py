"""
Spatial Filters Module

Provides the filters of the line reconstruction pipeline:
- Band filter: Keep fragments on the expected rows of the layout
- Noise filter: Remove boilerplate codes and stray tokens
- Column filter: Keep merged lines ending on an expected column
- Dictionary filter: Keep lines made only of known words
"""
import logging
from typing import Sequence, Tuple

from core.models import LayoutProfile, TextFragment
from services.lexicon_service import Lexicon
from utils.bbox_utils import format_fragment, near_any
from utils.text_utils import is_boilerplate

logger = logging.getLogger(__name__)


def is_in_band(fragment: TextFragment, profile: LayoutProfile) -> bool:
    """Check whether a fragment's top lies near one of the layout bands."""
    return near_any(fragment.bounding_box.top, profile.bands, profile.band_tolerance)


def is_noise(fragment: TextFragment, profile: LayoutProfile) -> bool:
    """
    Check whether a fragment is boilerplate or a known stray token.

    Args:
        fragment: Raw OCR fragment
        profile: Active layout profile

    Returns:
        True if the fragment should be discarded
    """
    description = fragment.description
    return is_boilerplate(description) or description in profile.noise_tokens


def filter_band_noise(
    fragments: Sequence[TextFragment],
    profile: LayoutProfile
) -> Tuple[TextFragment, ...]:
    """
    Drop fragments that are too wide, off-band or noise.

    Args:
        fragments: Raw OCR fragments
        profile: Active layout profile

    Returns:
        Surviving fragments in input order
    """
    kept = []
    for fragment in fragments:
        # inverted boxes (right < left) are rejected like oversized ones
        width = fragment.bounding_box.width
        if width < 0 or width > profile.max_fragment_width:
            continue
        if not is_in_band(fragment, profile):
            continue
        if is_noise(fragment, profile):
            continue
        kept.append(fragment)

    logger.debug("Band/noise filter kept %d of %d fragments", len(kept), len(fragments))
    return tuple(kept)


def filter_columns(
    fragments: Sequence[TextFragment],
    profile: LayoutProfile
) -> Tuple[TextFragment, ...]:
    """
    Drop lines that are too long or do not end on a known column.

    Args:
        fragments: Merged lines
        profile: Active layout profile

    Returns:
        Surviving lines in input order
    """
    kept = tuple(
        fragment for fragment in fragments
        if len(fragment.description) <= profile.max_line_length
        and near_any(fragment.bounding_box.right, profile.column_ends, profile.column_tolerance)
    )
    logger.debug("Column filter kept %d of %d lines", len(kept), len(fragments))
    return kept


def filter_unknown_words(
    fragments: Sequence[TextFragment],
    lexicon: Lexicon
) -> Tuple[TextFragment, ...]:
    """
    Keep only lines whose every word is in the lexicon.

    Args:
        fragments: Candidate lines
        lexicon: Word list

    Returns:
        Lines made only of known words
    """
    kept = []
    for fragment in fragments:
        if lexicon.is_fully_known(fragment.description):
            kept.append(fragment)
        else:
            logger.debug("Dictionary rejected %s", format_fragment(fragment))

    logger.debug("Dictionary filter kept %d of %d lines", len(kept), len(fragments))
    return tuple(kept)
