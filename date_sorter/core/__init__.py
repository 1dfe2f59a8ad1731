"""Date resolution engine: extraction, validation and reconciliation."""

from .date_extraction import MetadataDateExtractor, NameDateExtractor
from .date_validation import DateValidator
from .resolver import DateResolver, ExtractionOutcome, ExtractionStatus
from .types import DateCandidate, DateSource, FileEntry, ResolutionPolicy

__all__ = [
    "DateCandidate",
    "DateResolver",
    "DateSource",
    "DateValidator",
    "ExtractionOutcome",
    "ExtractionStatus",
    "FileEntry",
    "MetadataDateExtractor",
    "NameDateExtractor",
    "ResolutionPolicy",
]
