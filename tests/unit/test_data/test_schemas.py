"""
Unit tests for data.schemas module.
"""
import pytest
from pydantic import ValidationError

from data.schemas import AnnotationDocument, BlockType, TextAnnotation


class TestTextAnnotation:
    """Tests for TextAnnotation schema."""

    def test_camel_case_fields(self):
        """Test parsing the OCR service's camelCase JSON."""
        annotation = TextAnnotation.model_validate({
            "locale": "fr",
            "description": "Chêne",
            "boundingPoly": {
                "vertices": {
                    "sw": {"x": 10, "y": 80},
                    "se": {"x": 90, "y": 80},
                    "ne": {"x": 90, "y": 20},
                    "nw": {"x": 10, "y": 20},
                }
            },
        })

        fragment = annotation.to_fragment()

        assert fragment.description == "Chêne"
        assert fragment.locale == "fr"
        assert fragment.bounding_box.left == 10
        assert fragment.bounding_box.right == 90
        assert fragment.bounding_box.top == 20
        assert fragment.bounding_box.bottom == 80

    def test_default_locale(self):
        """Test locale defaults to 'en'."""
        annotation = TextAnnotation.model_validate({
            "description": "Oak",
            "boundingPoly": {"vertices": {}},
        })

        assert annotation.locale == "en"

    def test_missing_coordinates_are_zero(self):
        """Test omitted vertex values read as zero."""
        annotation = TextAnnotation.model_validate({
            "description": "Oak",
            "boundingPoly": {"vertices": {"sw": {"y": 50}, "ne": {"x": 30}}},
        })

        box = annotation.to_fragment().bounding_box

        assert (box.sw.x, box.sw.y) == (0, 50)
        assert (box.ne.x, box.ne.y) == (30, 0)
        assert (box.nw.x, box.nw.y) == (0, 0)

    def test_description_required(self):
        """Test a missing description is rejected."""
        with pytest.raises(ValidationError):
            TextAnnotation.model_validate({"boundingPoly": {"vertices": {}}})


class TestAnnotationDocument:
    """Tests for AnnotationDocument schema."""

    def test_to_fragments_keeps_order(self):
        """Test fragments come out in document order."""
        document = AnnotationDocument.model_validate({
            "textAnnotations": [
                {"description": "B", "boundingPoly": {"vertices": {}}},
                {"description": "A", "boundingPoly": {"vertices": {}}},
            ]
        })

        assert [f.description for f in document.to_fragments()] == ["B", "A"]
        assert document.full_text_annotation is None

    def test_full_text_annotation(self):
        """Test the full-page layout is parsed."""
        document = AnnotationDocument.model_validate({
            "textAnnotations": [],
            "fullTextAnnotation": {
                "text": "Oak\n",
                "pages": [{
                    "width": 3300,
                    "height": 5100,
                    "property": {"detectedLanguages": [{"languageCode": "en", "confidence": 0.9}]},
                    "blocks": [{
                        "blockType": "TEXT",
                        "paragraphs": [{
                            "words": [{"symbols": [{"text": "O"}, {"text": "a"}, {"text": "k"}]}]
                        }],
                    }],
                }],
            },
        })

        page = document.full_text_annotation.pages[0]
        block = page.blocks[0]

        assert page.property.detected_languages[0].language_code == "en"
        assert block.block_type is BlockType.TEXT
        assert block.paragraphs[0].words[0].text == "Oak"

    def test_unknown_fields_ignored(self):
        """Test extra OCR fields do not fail validation."""
        document = AnnotationDocument.model_validate({
            "textAnnotations": [
                {"description": "Oak", "boundingPoly": {"vertices": {}, "normalizedVertices": []}, "score": 1}
            ],
            "error": None,
        })

        assert len(document.to_fragments()) == 1

    def test_text_annotations_required(self):
        """Test a document without textAnnotations is rejected."""
        with pytest.raises(ValidationError):
            AnnotationDocument.model_validate({})
