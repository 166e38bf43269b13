"""
Constants and layout profiles for label extraction.
"""
from .models import CropWindow, LayoutProfile

# Description that marks the buyer variant of the label
BUYER_MARKER = "BUYER"

# Right-edge positions shared by both layout variants
COLUMN_ENDS = (450, 940, 1220, 1980, 2280, 3025, 3160)

# Stray OCR tokens that never form part of a label line
NOISE_TOKENS = frozenset({
    "Supplier",
    "No",
    ":",
    "|",
    ".",
    "Mr",
    "lo",
})

BUYER_PROFILE = LayoutProfile(
    name="buyer",
    bands=(1450, 3190, 4420),
    expected_lines=6,
    column_ends=COLUMN_ENDS,
    noise_tokens=NOISE_TOKENS,
)

DEFAULT_PROFILE = LayoutProfile(
    name="default",
    bands=(1130, 1480, 2550, 2900, 3970, 4300, 4420, 4790),
    expected_lines=9,
    column_ends=COLUMN_ENDS,
    noise_tokens=NOISE_TOKENS,
)

# Reference crop around each extracted value
DEFAULT_CROP_WINDOW = CropWindow(
    width=960,
    height=1100,
    x_offset=850,
    y_offset=1160,
    scale_percent=25,
)

# Word list and domain terms missing from general dictionaries
DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"
DEFAULT_EXTRA_WORDS = (
    "handpainted",
    "stardust",
)

# Identifiers with known-bad scans, excluded from batch runs
DEFAULT_SKIP_LIST = (
    "0230_038",
    "0230_042",
    "0230_048",
)

# File naming
ANNOTATION_EXTENSION = "txt"
IMAGE_SUFFIX = ".rot.png"
TRANSCRIPT_SUFFIX = ".extract.txt"
CROP_NAME_TEMPLATE = "{identifier}.crop.{index}.png"
