"""
Pytest configuration and global fixtures.
"""
import json
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.exceptions import CropError
from core.models import BoundingBox, TextFragment
from services.crop_service import BaseCropper
from services.lexicon_service import Lexicon


def make_fragment(description, left, right, top, bottom=None, locale="en"):
    """Build an axis-aligned fragment; bottom defaults to top - 60."""
    if bottom is None:
        bottom = top - 60
    return TextFragment(
        description=description,
        bounding_box=BoundingBox.from_extents(left, right, top, bottom),
        locale=locale,
    )


def annotation_json(description, left, right, top, bottom=None):
    """OCR JSON entry matching make_fragment."""
    if bottom is None:
        bottom = top - 60
    return {
        "description": description,
        "boundingPoly": {
            "vertices": {
                "sw": {"x": left, "y": bottom},
                "se": {"x": right, "y": bottom},
                "ne": {"x": right, "y": top},
                "nw": {"x": left, "y": top},
            }
        },
    }


# Buyer label: 6 values on 3 bands plus the header, all clear of each other
BUYER_LAYOUT = [
    ("BUYER", 1300, 1500, 1450),
    ("Walnut Finish", 100, 440, 1450),
    ("Oak", 700, 940, 1450),
    ("Stardust", 1800, 1980, 1450),
    ("Maple", 100, 450, 3190),
    ("Cherry Wood", 800, 1220, 3190),
    ("Birch", 2000, 2280, 4420),
    ("Surface", 2700, 3160, 4420),
]

# Default label: 9 values plus the header on 5 bands
DEFAULT_LAYOUT = [
    ("Oak", 100, 450, 1130),
    ("Maple", 700, 940, 1130),
    ("Walnut", 100, 450, 1480),
    ("Cherry", 700, 940, 1480),
    ("Pine", 100, 450, 2550),
    ("Birch", 700, 940, 2550),
    ("Cedar", 100, 450, 2900),
    ("Ash", 700, 940, 2900),
    ("Elm", 100, 450, 3970),
    ("Surface", 700, 940, 3970),
]

WORDS = [
    "oak", "maple", "walnut", "cherry", "pine", "birch", "cedar", "ash",
    "elm", "surface", "finish", "wood", "teak",
]


class RecordingCropper(BaseCropper):
    """Cropper that records requests and optionally fails for some sources."""

    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.calls = []
        self._lock = threading.Lock()

    def crop(self, source_path, region, scale_percent, dest_path):
        if any(marker in source_path for marker in self.fail_for):
            raise CropError("graphicsmagick failed")
        with self._lock:
            self.calls.append((source_path, region, scale_percent, dest_path))
        Path(dest_path).write_bytes(b"png")


@pytest.fixture
def fragment_factory():
    """Provide make_fragment to tests."""
    return make_fragment


@pytest.fixture
def buyer_fragments():
    return [make_fragment(*row) for row in BUYER_LAYOUT]


@pytest.fixture
def default_fragments():
    return [make_fragment(*row) for row in DEFAULT_LAYOUT]


@pytest.fixture
def words_file(tmp_path):
    """Small word list on disk."""
    path = tmp_path / "words"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def lexicon(words_file):
    return Lexicon(words_file, extra_words=("handpainted", "stardust"))


@pytest.fixture
def missing_lexicon(tmp_path):
    """Lexicon whose word list does not exist."""
    return Lexicon(str(tmp_path / "no-such-words"), extra_words=())


@pytest.fixture
def recording_cropper():
    return RecordingCropper()


@pytest.fixture
def data_dir(tmp_path):
    """Empty data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path):
    """Empty output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def write_document(data_dir):
    """Write an OCR document for an identifier from layout rows."""
    def _write(identifier, rows):
        document = {"textAnnotations": [annotation_json(*row) for row in rows]}
        path = data_dir / f"{identifier}.txt"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def buyer_layout():
    """Layout rows (description, left, right, top) of a buyer label."""
    return list(BUYER_LAYOUT)


@pytest.fixture
def default_layout():
    """Layout rows (description, left, right, top) of a default label."""
    return list(DEFAULT_LAYOUT)


@pytest.fixture
def cropper_factory():
    """Build a RecordingCropper that fails for the given source markers."""
    return RecordingCropper
