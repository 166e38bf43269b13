"""
Batch Service - Runs label extraction over a whole data directory.

Identifiers are discovered from the annotation files directly inside the
data directory and extracted on a thread pool. A failing identifier never
stops the others: every failure is tagged and collected, and reported once
all work is done.
"""
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from core.constants import ANNOTATION_EXTENSION, TRANSCRIPT_SUFFIX
from core.exceptions import BatchExtractionError, ItemExtractionError

from .extraction_service import ExtractionService

logger = logging.getLogger(__name__)


class FailureCollector:
    """Append-only, thread-safe list of tagged failures."""

    def __init__(self):
        self._errors: List[ItemExtractionError] = []
        self._lock = threading.Lock()

    def add(self, identifier: Optional[str], error: BaseException) -> None:
        tagged = error if isinstance(error, ItemExtractionError) else ItemExtractionError(identifier, error)
        with self._lock:
            self._errors.append(tagged)

    @property
    def errors(self) -> List[ItemExtractionError]:
        with self._lock:
            return list(self._errors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)


class BatchService:
    """Service for extracting every label of a data directory."""

    def __init__(
        self,
        extraction_service: ExtractionService,
        data_dir: str,
        skip_list: Iterable[str] = (),
        output_dir: str = ".",
        max_workers: Optional[int] = None,
        annotation_extension: str = ANNOTATION_EXTENSION,
        transcript_suffix: str = TRANSCRIPT_SUFFIX
    ):
        """
        Initialize batch service.

        Args:
            extraction_service: Per-identifier extraction
            data_dir: Directory holding the annotation files
            skip_list: Identifiers excluded from the run
            output_dir: Directory receiving the transcripts
            max_workers: Worker pool size (default: CPU count)
            annotation_extension: Extension of annotation files, without dot
            transcript_suffix: Suffix appended to the identifier for transcripts
        """
        self.extraction_service = extraction_service
        self.data_dir = data_dir
        self.skip_list = frozenset(skip_list)
        self.output_dir = output_dir
        self.max_workers = max_workers or os.cpu_count() or 1
        self.annotation_extension = annotation_extension
        self.transcript_suffix = transcript_suffix

    def transcript_path(self, identifier: str) -> str:
        return os.path.join(self.output_dir, f"{identifier}{self.transcript_suffix}")

    def discover_identifiers(self, failures: FailureCollector) -> List[str]:
        """
        List identifiers of annotation files directly inside the data directory.

        Sub-directories are skipped, not recursed into. Entries that cannot be
        inspected are recorded in `failures` and traversal continues.

        Args:
            failures: Collector receiving traversal errors

        Returns:
            Sorted identifiers, skip list excluded
        """
        suffix = f".{self.annotation_extension}"
        identifiers = []

        try:
            entries = list(os.scandir(self.data_dir))
        except OSError as e:
            failures.add(None, e)
            return identifiers

        for entry in entries:
            try:
                if entry.is_dir():
                    continue
                if not entry.name.endswith(suffix):
                    continue
                identifier = entry.name[:-len(suffix)]
                if not identifier:
                    raise ValueError(f"no file name: {entry.path}")
            except (OSError, ValueError) as e:
                failures.add(None, e)
                continue

            if identifier in self.skip_list:
                logger.info("Skipping %s", identifier)
                continue
            identifiers.append(identifier)

        return sorted(identifiers)

    def _run_one(self, identifier: str, failures: FailureCollector) -> None:
        try:
            self.extraction_service.extract(identifier, self.transcript_path(identifier))
        except Exception as e:
            logger.warning("Extraction failed for %s: %s", identifier, e)
            failures.add(identifier, e)

    def run(self) -> List[str]:
        """
        Extract every discovered identifier.

        Returns:
            Identifiers that were processed

        Raises:
            BatchExtractionError: If any identifier or directory entry failed
        """
        failures = FailureCollector()
        identifiers = self.discover_identifiers(failures)
        logger.info(
            "Extracting %d labels with %d workers", len(identifiers), self.max_workers
        )

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for identifier in identifiers:
                executor.submit(self._run_one, identifier, failures)

        if len(failures):
            raise BatchExtractionError(failures.errors)
        return identifiers
