"""
Line Reconstruction Module

Turns the unordered OCR fragments of one label into its section header and
value lines. The pipeline is a fixed chain of pure stages:

1. Band + noise filter
2. Tolerant reading order
3. Merge of adjacent fragments
4. Column filter
5. Dictionary fallback, only when the line count is off
6. Exact ordering and header split

The count of surviving lines is the correctness check: geometry alone is
trusted unless it misses the expected count, in which case lines must also
consist of dictionary words.
"""
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from core.constants import BUYER_MARKER, BUYER_PROFILE, DEFAULT_PROFILE
from core.models import LayoutProfile, TextFragment
from services.lexicon_service import Lexicon
from utils.bbox_utils import format_fragment

from .filters import filter_band_noise, filter_columns, filter_unknown_words
from .grouping import merge_adjacent_fragments
from .reading_order import get_exact_order, get_reading_order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    """Outcome of reconstructing one label."""
    profile: LayoutProfile
    candidates: Tuple[TextFragment, ...]
    dictionary_fallback_applied: bool = False

    @property
    def is_conclusive(self) -> bool:
        return len(self.candidates) == self.profile.expected_candidates

    @property
    def values(self) -> Tuple[TextFragment, ...]:
        """Value lines in output order, empty when inconclusive."""
        if not self.is_conclusive:
            return ()
        return self.candidates[:self.profile.expected_lines]

    @property
    def header(self) -> str:
        """Section header text, empty when inconclusive."""
        if not self.is_conclusive:
            return ""
        return self.candidates[self.profile.expected_lines].description

    def transcript_lines(self) -> List[str]:
        """Lines formatted as '<header> - <value>'."""
        header = self.header
        return [f"{header} - {value.description}" for value in self.values]


def select_profile(
    fragments: Sequence[TextFragment],
    buyer_profile: LayoutProfile = BUYER_PROFILE,
    default_profile: LayoutProfile = DEFAULT_PROFILE
) -> LayoutProfile:
    """Pick the buyer layout when a fragment reads exactly 'BUYER'."""
    if any(fragment.description == BUYER_MARKER for fragment in fragments):
        return buyer_profile
    return default_profile


class LineReconstructor:
    """Runs the reconstruction pipeline with an injected lexicon."""

    def __init__(
        self,
        lexicon: Lexicon,
        buyer_profile: LayoutProfile = BUYER_PROFILE,
        default_profile: LayoutProfile = DEFAULT_PROFILE
    ):
        """
        Initialize reconstructor.

        Args:
            lexicon: Word list for the dictionary fallback
            buyer_profile: Layout used when the buyer marker is present
            default_profile: Layout used otherwise
        """
        self.lexicon = lexicon
        self.buyer_profile = buyer_profile
        self.default_profile = default_profile

    def reconstruct(self, fragments: Sequence[TextFragment]) -> ReconstructionResult:
        """
        Reconstruct header and value lines from raw fragments.

        Args:
            fragments: Raw OCR fragments of one label

        Returns:
            ReconstructionResult; check `is_conclusive` before using values
        """
        profile = select_profile(fragments, self.buyer_profile, self.default_profile)
        logger.debug("Using %s layout for %d fragments", profile.name, len(fragments))
        for fragment in fragments:
            logger.debug("%s", format_fragment(fragment))

        candidates = filter_band_noise(fragments, profile)
        candidates = get_reading_order(candidates, profile.order_tolerance)
        candidates = merge_adjacent_fragments(candidates, profile)
        candidates = filter_columns(candidates, profile)

        fallback = len(candidates) != profile.expected_candidates
        if fallback:
            logger.debug(
                "Found %d lines, expected %d; filtering with dictionary",
                len(candidates), profile.expected_candidates
            )
            candidates = filter_unknown_words(candidates, self.lexicon)

        if len(candidates) == profile.expected_candidates:
            candidates = get_exact_order(candidates)

        return ReconstructionResult(
            profile=profile,
            candidates=tuple(candidates),
            dictionary_fallback_applied=fallback,
        )
