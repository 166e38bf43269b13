"""
Repository pattern for data access.

Provides clean separation between the OCR files on disk and business logic.
"""
import logging
import os
from typing import List

from pydantic import ValidationError

from core.constants import ANNOTATION_EXTENSION, IMAGE_SUFFIX
from core.exceptions import InputMalformedError
from core.models import TextFragment
from data.schemas import AnnotationDocument

logger = logging.getLogger(__name__)


class AnnotationRepository:
    """Repository for the OCR documents and images of a data directory."""

    def __init__(
        self,
        data_dir: str,
        annotation_extension: str = ANNOTATION_EXTENSION,
        image_suffix: str = IMAGE_SUFFIX
    ):
        self.data_dir = data_dir
        self.annotation_extension = annotation_extension
        self.image_suffix = image_suffix

    def annotation_path(self, identifier: str) -> str:
        """Path of the OCR JSON for an identifier."""
        return os.path.join(self.data_dir, f"{identifier}.{self.annotation_extension}")

    def image_path(self, identifier: str) -> str:
        """Path of the rotated source image for an identifier."""
        return os.path.join(self.data_dir, f"{identifier}{self.image_suffix}")

    def load_document(self, identifier: str) -> AnnotationDocument:
        """
        Load and validate the OCR document for an identifier.

        Raises:
            InputMalformedError: If the file is missing, unreadable or invalid
        """
        path = self.annotation_path(identifier)
        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputMalformedError(path, str(e)) from e

        try:
            return AnnotationDocument.model_validate_json(raw)
        except ValidationError as e:
            raise InputMalformedError(path, str(e)) from e

    def load_fragments(self, identifier: str) -> List[TextFragment]:
        """Load the text fragments for an identifier."""
        document = self.load_document(identifier)
        fragments = document.to_fragments()
        logger.debug("Loaded %d fragments for %s", len(fragments), identifier)
        return fragments
