"""
Core domain models for label extraction.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class Vertex:
    """One corner of a bounding polygon. Missing coordinates are zero."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class BoundingBox:
    """
    Quadrilateral bounding box named by compass corners.

    Extents are derived from the corner pairs on each side, since OCR
    polygons are not guaranteed to be axis-aligned.
    """
    sw: Vertex = field(default_factory=Vertex)
    se: Vertex = field(default_factory=Vertex)
    ne: Vertex = field(default_factory=Vertex)
    nw: Vertex = field(default_factory=Vertex)

    @property
    def left(self) -> int:
        return min(self.sw.x, self.nw.x)

    @property
    def right(self) -> int:
        return max(self.se.x, self.ne.x)

    @property
    def top(self) -> int:
        return max(self.ne.y, self.nw.y)

    @property
    def bottom(self) -> int:
        return min(self.sw.y, self.se.y)

    @property
    def width(self) -> int:
        """Calculate width."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Calculate height."""
        return self.top - self.bottom

    @property
    def area(self) -> int:
        """Calculate area."""
        return self.width * self.height

    def merge(self, other: "BoundingBox") -> "BoundingBox":
        """
        Combine two boxes corner by corner.

        Each output corner only looks at the same corner of both inputs:
        sw takes min x / min y, se max x / min y, ne max x / max y and
        nw min x / max y.
        """
        return BoundingBox(
            sw=Vertex(min(self.sw.x, other.sw.x), min(self.sw.y, other.sw.y)),
            se=Vertex(max(self.se.x, other.se.x), min(self.se.y, other.se.y)),
            ne=Vertex(max(self.ne.x, other.ne.x), max(self.ne.y, other.ne.y)),
            nw=Vertex(min(self.nw.x, other.nw.x), max(self.nw.y, other.nw.y)),
        )

    @classmethod
    def from_extents(cls, left: int, right: int, top: int, bottom: int) -> "BoundingBox":
        """Build an axis-aligned box from its four extents."""
        return cls(
            sw=Vertex(left, bottom),
            se=Vertex(right, bottom),
            ne=Vertex(right, top),
            nw=Vertex(left, top),
        )


@dataclass(frozen=True)
class TextFragment:
    """A detected text span with its bounding polygon."""
    description: str
    bounding_box: BoundingBox
    locale: str = "en"

    def with_text(self, description: str, bounding_box: BoundingBox) -> "TextFragment":
        """Return a new fragment keeping this fragment's locale."""
        return replace(self, description=description, bounding_box=bounding_box)


@dataclass(frozen=True)
class LayoutProfile:
    """
    Geometry of one label layout variant.

    Bands are the expected `top` positions of meaningful lines, column ends
    are the expected `right` positions. The reconstruction succeeds only
    when exactly `expected_lines + 1` lines survive (values plus header).
    """
    name: str
    bands: Tuple[int, ...]
    expected_lines: int
    column_ends: Tuple[int, ...]
    noise_tokens: FrozenSet[str] = frozenset()
    band_tolerance: int = 200
    max_fragment_width: int = 500
    order_tolerance: int = 50
    merge_vertical_tolerance: int = 100
    merge_gap: int = 100
    join_gap: int = 10
    max_line_length: int = 50
    column_tolerance: int = 200

    @property
    def expected_candidates(self) -> int:
        """Values plus the section header line."""
        return self.expected_lines + 1


@dataclass(frozen=True)
class CropWindow:
    """Fixed-size crop window anchored relative to a fragment's corner."""
    width: int = 960
    height: int = 1100
    x_offset: int = 850
    y_offset: int = 1160
    scale_percent: int = 25


@dataclass(frozen=True)
class CropRegion:
    """Pixel region of a source image."""
    width: int
    height: int
    x: int
    y: int

    @property
    def geometry(self) -> str:
        """ImageMagick geometry string, e.g. ``960x1100+150-60``."""
        return f"{self.width}x{self.height}{self.x:+d}{self.y:+d}"

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow crop box (left, upper, right, lower)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)
