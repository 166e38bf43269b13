#!/usr/bin/env python3
"""
CLI runner for label line extraction.

With an image identifier, extracts that label and prints its transcript.
Without one, extracts every label of the data directory in parallel.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.exceptions import BatchExtractionError, ExtractionError
from services.crop_service import CropperFactory
from services.dependencies import get_batch_service, get_extraction_service


def extract_one_cli(identifier: str, run_settings) -> int:
    """Extract a single label to stdout."""
    service = get_extraction_service(run_settings)
    try:
        service.extract(identifier)
    except ExtractionError as e:
        print(f"error: {e}", file=sys.stderr)
        if e.__cause__ is not None:
            print(f"caused by: {e.__cause__}", file=sys.stderr)
        return 1
    return 0


def extract_all_cli(run_settings) -> int:
    """Extract every label of the data directory."""
    print("=" * 60)
    print(f"Extracting labels from: {run_settings.data_dir}")
    print(f"Output directory: {run_settings.output_dir}")
    print("=" * 60)

    service = get_batch_service(run_settings)
    try:
        identifiers = service.run()
    except BatchExtractionError as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"\n❌ {len(e.errors)} failures", file=sys.stderr)
        return 1

    print(f"\n✓ Complete! {len(identifiers)} labels extracted")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Extract label lines and reference crops from OCR output'
    )
    parser.add_argument('image', nargs='?', help='Image identifier (e.g. 0230_017)')
    parser.add_argument('--data-dir', type=str, help='Directory with OCR JSON and images')
    parser.add_argument('--output-dir', type=str, help='Directory for transcripts and crops')
    parser.add_argument('--workers', type=int, help='Worker pool size (default: CPU count)')
    parser.add_argument(
        '--cropper', type=str,
        choices=CropperFactory.get_supported_backends(),
        help='Crop backend'
    )

    args = parser.parse_args(argv)

    overrides = {
        'data_dir': args.data_dir,
        'output_dir': args.output_dir,
        'max_workers': args.workers,
        'cropper_backend': args.cropper,
    }
    run_settings = settings.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    logging.basicConfig(
        level=run_settings.get_effective_log_level(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.image:
        return extract_one_cli(args.image, run_settings)
    return extract_all_cli(run_settings)


if __name__ == '__main__':
    sys.exit(main())
