"""
Crop Service - Produces reference crops of extracted label values.

Cropping is delegated to a backend implementing `BaseCropper`:
- GraphicsMagickCropper: runs `gm convert` as a subprocess
- PillowCropper: crops in-process with Pillow
"""
import logging
import subprocess
from abc import ABC, abstractmethod

from core.exceptions import CropError
from core.models import CropRegion
from utils.image_utils import crop_and_scale

logger = logging.getLogger(__name__)


class BaseCropper(ABC):
    """
    Abstract base class for crop backends.

    Implementations crop `region` out of `source_path`, scale it to
    `scale_percent` and write it to `dest_path`, raising CropError on failure.
    """

    @abstractmethod
    def crop(
        self,
        source_path: str,
        region: CropRegion,
        scale_percent: int,
        dest_path: str
    ) -> None:
        """
        Crop and scale one region.

        Raises:
            CropError: If the image could not be produced
        """
        pass


class GraphicsMagickCropper(BaseCropper):
    """Crop backend using the GraphicsMagick command-line tool."""

    def __init__(self, binary: str = "gm"):
        self.binary = binary

    def build_command(
        self,
        source_path: str,
        region: CropRegion,
        scale_percent: int,
        dest_path: str
    ) -> list:
        """Build the `gm convert` argument list."""
        return [
            self.binary, "convert", source_path,
            "-crop", region.geometry,
            "-resize", f"{scale_percent}%",
            dest_path,
        ]

    def crop(self, source_path, region, scale_percent, dest_path):
        command = self.build_command(source_path, region, scale_percent, dest_path)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise CropError(f"could not run {self.binary}: {e}") from e

        if result.returncode != 0:
            raise CropError(
                f"graphicsmagick failed with exit status {result.returncode}: "
                f"{result.stderr.strip()}"
            )


class PillowCropper(BaseCropper):
    """Crop backend using Pillow."""

    def crop(self, source_path, region, scale_percent, dest_path):
        try:
            crop_and_scale(source_path, region, scale_percent, dest_path)
        except OSError as e:
            raise CropError(f"could not crop {source_path}: {e}") from e


class CropperFactory:
    """
    Factory class for creating crop backends.
    """

    @staticmethod
    def create_cropper(backend: str, **kwargs) -> BaseCropper:
        """
        Create a cropper for the named backend.

        Args:
            backend: Backend name ('graphicsmagick' or 'pillow')
            **kwargs: Backend-specific configuration
                For GraphicsMagick:
                    - binary: Executable name or path (default: gm)

        Returns:
            Configured cropper instance

        Raises:
            ValueError: If backend is not supported
        """
        backend = backend.lower().strip()

        if backend in ('graphicsmagick', 'gm'):
            return GraphicsMagickCropper(binary=kwargs.get('binary', 'gm'))
        elif backend == 'pillow':
            return PillowCropper()
        else:
            raise ValueError(
                f"Unsupported crop backend: '{backend}'. "
                f"Supported backends: 'graphicsmagick', 'pillow'"
            )

    @staticmethod
    def get_supported_backends():
        """
        Get list of supported backends.

        Returns:
            List of backend names
        """
        return ['graphicsmagick', 'pillow']
