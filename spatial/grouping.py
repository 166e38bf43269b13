"""
Grouping Module

Coalesces adjacent fragments that belong to the same text line. OCR often
splits one line (or even one word) into several fragments; neighbours in
reading order on the same row and close together are joined back.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from core.models import LayoutProfile, TextFragment
from utils.bbox_utils import format_fragment, horizontal_gap, vertical_offset
from utils.text_utils import join_descriptions

logger = logging.getLogger(__name__)


def try_merge(
    first: TextFragment,
    second: TextFragment,
    profile: LayoutProfile
) -> Optional[TextFragment]:
    """
    Merge two neighbouring fragments if they sit on the same line.

    Fragments merge when their tops are within the vertical tolerance and
    the gap from the first's right edge to the second's left edge is within
    the merge gap. Gaps up to the join gap are treated as a word split by
    OCR and joined without a space.

    Args:
        first: Fragment earlier in reading order (possibly already merged)
        second: Next fragment in reading order
        profile: Active layout profile

    Returns:
        Merged fragment, or None if the two stay separate
    """
    first_box = first.bounding_box
    second_box = second.bounding_box
    offset = vertical_offset(first_box, second_box)
    gap = horizontal_gap(first_box, second_box)

    logger.debug(
        "coalesce\n\t%s\n\t%s\n\t%d\t%d",
        format_fragment(first), format_fragment(second), offset, gap
    )

    if offset > profile.merge_vertical_tolerance or gap > profile.merge_gap:
        return None

    separator = "" if gap <= profile.join_gap else " "
    return first.with_text(
        join_descriptions(first.description, second.description, separator),
        first_box.merge(second_box),
    )


def merge_adjacent_fragments(
    fragments: Sequence[TextFragment],
    profile: LayoutProfile
) -> Tuple[TextFragment, ...]:
    """
    Coalesce runs of mergeable neighbours in one left-to-right pass.

    A freshly merged fragment can merge again with the next one; fragments
    that are not adjacent are never compared.

    Args:
        fragments: Fragments in reading order
        profile: Active layout profile

    Returns:
        Merged lines in reading order
    """
    merged: List[TextFragment] = []
    current: Optional[TextFragment] = None

    for fragment in fragments:
        if current is None:
            current = fragment
            continue

        combined = try_merge(current, fragment, profile)
        if combined is None:
            merged.append(current)
            current = fragment
        else:
            current = combined

    if current is not None:
        merged.append(current)

    logger.debug("Merged %d fragments into %d lines", len(fragments), len(merged))
    return tuple(merged)
