"""
Exceptions raised while extracting label lines.
"""
from typing import List, Optional


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class InputMalformedError(ExtractionError):
    """OCR document is missing, unreadable or does not match the schema."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"malformed OCR document {path}: {reason}")


class ReconstructionInconclusiveError(ExtractionError):
    """The pipeline could not settle on the expected number of lines."""

    def __init__(self, profile: str, found: int, expected: int):
        self.profile = profile
        self.found = found
        self.expected = expected
        super().__init__(
            f"could not reconstruct {profile} label: "
            f"{found} candidate lines, expected {expected}"
        )


class CropError(ExtractionError):
    """The crop tool failed to produce a reference image."""


class DictionaryUnavailableError(ExtractionError):
    """The word list could not be loaded."""


class TranscriptCleanupError(ExtractionError):
    """Removing a partial transcript failed after another failure."""

    def __init__(self, path: str, original: BaseException, cleanup_error: BaseException):
        self.path = path
        self.original = original
        self.cleanup_error = cleanup_error
        super().__init__(
            f"{original} (and failed to remove {path}: {cleanup_error})"
        )


class ItemExtractionError(ExtractionError):
    """A failure tagged with the identifier it happened on."""

    def __init__(self, identifier: Optional[str], cause: BaseException):
        self.identifier = identifier
        self.cause = cause
        tag = identifier if identifier is not None else "<traversal>"
        super().__init__(f"[{tag}] {cause}")


class BatchExtractionError(ExtractionError):
    """Aggregate of every failure collected during a batch run."""

    def __init__(self, errors: List[ExtractionError]):
        self.errors = list(errors)
        details = "\n\t".join(str(e) for e in self.errors)
        super().__init__(f"some errors occurred:\n\t{details}")
