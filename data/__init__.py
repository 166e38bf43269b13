"""Data access layer - OCR document schemas and repository."""

from .schemas import (
    AnnotationDocument,
    TextAnnotation,
    BoundingPolySchema,
    FullTextAnnotation,
    BlockType,
)
from .repositories import AnnotationRepository

__all__ = [
    # Schemas
    'AnnotationDocument',
    'TextAnnotation',
    'BoundingPolySchema',
    'FullTextAnnotation',
    'BlockType',

    # Repository
    'AnnotationRepository',
]
