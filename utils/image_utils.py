"""
Image utilities for label extraction.

Handles cropping and scaling of reference images with Pillow.
"""
from typing import Tuple

from PIL import Image

from core.models import CropRegion


def scaled_size(size: Tuple[int, int], scale_percent: int) -> Tuple[int, int]:
    """
    Scale (width, height) by a percentage.

    Args:
        size: Original (width, height)
        scale_percent: Target size in percent of the original

    Returns:
        Scaled (width, height), never smaller than 1x1
    """
    width, height = size
    return (
        max(1, round(width * scale_percent / 100)),
        max(1, round(height * scale_percent / 100)),
    )


def crop_and_scale(
    source_path: str,
    region: CropRegion,
    scale_percent: int,
    dest_path: str
) -> Tuple[int, int]:
    """
    Crop a region from an image, resize it and save it as PNG.

    Areas of the region outside the source image are filled with black.

    Args:
        source_path: Path to the source image
        region: Region to crop
        scale_percent: Output size in percent of the region size
        dest_path: Output image path

    Returns:
        Size (width, height) of the saved image
    """
    with Image.open(source_path) as img:
        crop = img.crop(region.box)
        target = scaled_size(crop.size, scale_percent)
        resized = crop.resize(target, Image.Resampling.LANCZOS)
        resized.save(dest_path, format='PNG')
        return resized.size
