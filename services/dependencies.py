"""
Service wiring - Builds the services from settings.

The lexicon is created once here and injected into the reconstructor so all
workers share one read-only word list.
"""
from typing import Optional

from config.settings import Settings, settings as default_settings
from data.repositories import AnnotationRepository
from spatial.line_reconstruction import LineReconstructor

from .batch_service import BatchService
from .crop_service import BaseCropper, CropperFactory
from .extraction_service import ExtractionService
from .lexicon_service import Lexicon


def get_lexicon(settings: Settings = default_settings) -> Lexicon:
    """
    Build the lexicon (not loaded until first use).

    Returns:
        Lexicon configured from settings
    """
    return Lexicon(**settings.get_lexicon_config())


def get_cropper(settings: Settings = default_settings) -> BaseCropper:
    """
    Build the configured crop backend.

    Returns:
        BaseCropper instance
    """
    return CropperFactory.create_cropper(
        settings.cropper_backend,
        binary=settings.graphicsmagick_binary
    )


def get_extraction_service(
    settings: Settings = default_settings,
    cropper: Optional[BaseCropper] = None,
    lexicon: Optional[Lexicon] = None
) -> ExtractionService:
    """
    Build the per-identifier extraction service.

    Args:
        settings: Settings to use
        cropper: Crop backend (optional, built from settings if not provided)
        lexicon: Word list (optional, built from settings if not provided)

    Returns:
        ExtractionService instance
    """
    repository = AnnotationRepository(
        settings.data_dir,
        annotation_extension=settings.annotation_extension,
        image_suffix=settings.image_suffix
    )
    return ExtractionService(
        repository=repository,
        reconstructor=LineReconstructor(lexicon or get_lexicon(settings)),
        cropper=cropper or get_cropper(settings),
        output_dir=settings.output_dir
    )


def get_batch_service(
    settings: Settings = default_settings,
    extraction_service: Optional[ExtractionService] = None
) -> BatchService:
    """
    Build the batch service.

    Returns:
        BatchService instance
    """
    return BatchService(
        extraction_service=extraction_service or get_extraction_service(settings),
        data_dir=settings.data_dir,
        skip_list=settings.skip_list,
        output_dir=settings.output_dir,
        max_workers=settings.max_workers,
        annotation_extension=settings.annotation_extension,
        transcript_suffix=settings.transcript_suffix
    )
