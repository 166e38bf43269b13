"""
Extraction Service - Extracts the label lines of one identifier.

Loads the OCR fragments, reconstructs the header and value lines, writes the
transcript and requests one reference crop per value.
"""
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from core.constants import CROP_NAME_TEMPLATE, DEFAULT_CROP_WINDOW
from core.exceptions import ReconstructionInconclusiveError, TranscriptCleanupError
from core.models import CropWindow
from data.repositories import AnnotationRepository
from spatial.line_reconstruction import LineReconstructor, ReconstructionResult
from utils.bbox_utils import compute_crop_region

from .crop_service import BaseCropper

logger = logging.getLogger(__name__)


@contextmanager
def open_transcript(output_path: Optional[str]) -> Iterator[TextIO]:
    """Open the transcript file, or yield stdout when no path is given."""
    if output_path is None:
        yield sys.stdout
        return
    with open(output_path, "w", encoding="utf-8") as f:
        yield f


class ExtractionService:
    """Service for extracting one label."""

    def __init__(
        self,
        repository: AnnotationRepository,
        reconstructor: LineReconstructor,
        cropper: BaseCropper,
        crop_window: CropWindow = DEFAULT_CROP_WINDOW,
        output_dir: str = "."
    ):
        """
        Initialize extraction service.

        Args:
            repository: Source of OCR documents and images
            reconstructor: Line reconstruction pipeline
            cropper: Crop backend for reference images
            crop_window: Crop window placed around each value
            output_dir: Directory receiving the crop images
        """
        self.repository = repository
        self.reconstructor = reconstructor
        self.cropper = cropper
        self.crop_window = crop_window
        self.output_dir = output_dir

    def crop_path(self, identifier: str, index: int) -> str:
        """Output path of the crop for the index-th value."""
        return os.path.join(
            self.output_dir,
            CROP_NAME_TEMPLATE.format(identifier=identifier, index=index)
        )

    def extract(self, identifier: str, output_path: Optional[str] = None) -> ReconstructionResult:
        """
        Extract one label.

        Args:
            identifier: Label identifier
            output_path: Transcript path; stdout when None

        Returns:
            The conclusive ReconstructionResult

        Raises:
            ReconstructionInconclusiveError: If the line count never matched
            ExtractionError: On input, crop or cleanup failures
        """
        logger.info("Extracting %s", identifier)
        try:
            return self._extract(identifier, output_path)
        except BaseException as e:
            if output_path is not None and os.path.exists(output_path):
                try:
                    os.remove(output_path)
                except OSError as cleanup_error:
                    raise TranscriptCleanupError(output_path, e, cleanup_error) from e
            raise

    def _extract(self, identifier: str, output_path: Optional[str]) -> ReconstructionResult:
        with open_transcript(output_path) as out:
            fragments = self.repository.load_fragments(identifier)
            result = self.reconstructor.reconstruct(fragments)

            if not result.is_conclusive:
                raise ReconstructionInconclusiveError(
                    result.profile.name,
                    len(result.candidates),
                    result.profile.expected_candidates,
                )

            source_path = self.repository.image_path(identifier)
            for index, (line, value) in enumerate(zip(result.transcript_lines(), result.values)):
                out.write(line + "\n")

                region = compute_crop_region(value.bounding_box, self.crop_window)
                self.cropper.crop(
                    source_path,
                    region,
                    self.crop_window.scale_percent,
                    self.crop_path(identifier, index),
                )

            out.flush()

        logger.debug("Extracted %d lines for %s", len(result.values), identifier)
        return result
