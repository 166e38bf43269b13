"""
Pydantic schemas for the OCR annotation document.

Field names follow the camelCase JSON produced by the OCR service.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models import BoundingBox, TextFragment, Vertex


class OCRSchema(BaseModel):
    """Base schema: camelCase aliases, unknown fields ignored."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class VertexSchema(OCRSchema):
    # values can be missing when zero
    x: int = 0
    y: int = 0

    def to_vertex(self) -> Vertex:
        return Vertex(self.x, self.y)


class BoundingVerticesSchema(OCRSchema):
    sw: VertexSchema = Field(default_factory=VertexSchema)
    se: VertexSchema = Field(default_factory=VertexSchema)
    ne: VertexSchema = Field(default_factory=VertexSchema)
    nw: VertexSchema = Field(default_factory=VertexSchema)


class BoundingPolySchema(OCRSchema):
    vertices: BoundingVerticesSchema = Field(default_factory=BoundingVerticesSchema)

    def to_bounding_box(self) -> BoundingBox:
        """Convert to the core BoundingBox."""
        v = self.vertices
        return BoundingBox(
            sw=v.sw.to_vertex(),
            se=v.se.to_vertex(),
            ne=v.ne.to_vertex(),
            nw=v.nw.to_vertex(),
        )


class TextAnnotation(OCRSchema):
    """One detected text span."""
    locale: str = "en"
    description: str
    bounding_poly: BoundingPolySchema

    def to_fragment(self) -> TextFragment:
        return TextFragment(
            description=self.description,
            bounding_box=self.bounding_poly.to_bounding_box(),
            locale=self.locale,
        )


class BlockType(str, Enum):
    """Kind of block in the full-page layout."""
    UNKNOWN = "UNKNOWN"
    TEXT = "TEXT"
    TABLE = "TABLE"
    PICTURE = "PICTURE"
    RULER = "RULER"
    BARCODE = "BARCODE"


class DetectedLanguage(OCRSchema):
    language_code: str


class TextProperty(OCRSchema):
    detected_languages: List[DetectedLanguage] = Field(default_factory=list)


class Symbol(OCRSchema):
    property: Optional[TextProperty] = None
    bounding_box: Optional[BoundingPolySchema] = None
    text: str = ""


class Word(OCRSchema):
    bounding_box: Optional[BoundingPolySchema] = None
    symbols: List[Symbol] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(symbol.text for symbol in self.symbols)


class Paragraph(OCRSchema):
    property: Optional[TextProperty] = None
    bounding_box: Optional[BoundingPolySchema] = None
    words: List[Word] = Field(default_factory=list)


class Block(OCRSchema):
    block_type: BlockType = BlockType.UNKNOWN
    property: Optional[TextProperty] = None
    bounding_box: Optional[BoundingPolySchema] = None
    paragraphs: List[Paragraph] = Field(default_factory=list)


class Page(OCRSchema):
    width: int = 0
    height: int = 0
    property: Optional[TextProperty] = None
    blocks: List[Block] = Field(default_factory=list)


class FullTextAnnotation(OCRSchema):
    """Full-page layout; validated but not used for line reconstruction."""
    text: str = ""
    pages: List[Page] = Field(default_factory=list)


class AnnotationDocument(OCRSchema):
    """OCR response for one label image."""
    text_annotations: List[TextAnnotation]
    full_text_annotation: Optional[FullTextAnnotation] = None

    def to_fragments(self) -> List[TextFragment]:
        """Convert text annotations to core fragments, in document order."""
        return [annotation.to_fragment() for annotation in self.text_annotations]
