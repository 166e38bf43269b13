"""Core package - Domain models, layout profiles and exceptions."""

from .models import (
    Vertex,
    BoundingBox,
    TextFragment,
    LayoutProfile,
    CropWindow,
    CropRegion,
)
from .constants import (
    BUYER_MARKER,
    BUYER_PROFILE,
    DEFAULT_PROFILE,
    COLUMN_ENDS,
    NOISE_TOKENS,
    DEFAULT_CROP_WINDOW,
)
from .exceptions import (
    ExtractionError,
    InputMalformedError,
    ReconstructionInconclusiveError,
    CropError,
    DictionaryUnavailableError,
    TranscriptCleanupError,
    ItemExtractionError,
    BatchExtractionError,
)

__all__ = [
    'Vertex',
    'BoundingBox',
    'TextFragment',
    'LayoutProfile',
    'CropWindow',
    'CropRegion',
    'BUYER_MARKER',
    'BUYER_PROFILE',
    'DEFAULT_PROFILE',
    'COLUMN_ENDS',
    'NOISE_TOKENS',
    'DEFAULT_CROP_WINDOW',
    'ExtractionError',
    'InputMalformedError',
    'ReconstructionInconclusiveError',
    'CropError',
    'DictionaryUnavailableError',
    'TranscriptCleanupError',
    'ItemExtractionError',
    'BatchExtractionError',
]
