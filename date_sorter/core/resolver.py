"""
Reconciliation of filename and metadata dates.

Each extractor yields an ``ExtractionOutcome`` that is either a candidate,
a failure, or "not attempted" when the policy disables that source. The
resolver combines the two outcomes into a single resolution date.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .date_extraction import MetadataDateExtractor, NameDateExtractor
from .date_validation import DateValidator
from .errors import DateError, ExtractorsDisabledError
from .types import DateCandidate, FileEntry, ResolutionPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExtractionStatus(str, Enum):
    """Result of running one extractor."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_ATTEMPTED = "not_attempted"


@dataclass(frozen=True)
class ExtractionOutcome:
    """Tagged result of a single extractor."""

    status: ExtractionStatus
    candidate: Optional[DateCandidate] = None
    error: Optional[DateError] = None

    @classmethod
    def succeeded(cls, candidate: DateCandidate) -> "ExtractionOutcome":
        return cls(status=ExtractionStatus.SUCCEEDED, candidate=candidate)

    @classmethod
    def failed(cls, error: DateError) -> "ExtractionOutcome":
        return cls(status=ExtractionStatus.FAILED, error=error)

    @classmethod
    def not_attempted(cls) -> "ExtractionOutcome":
        return cls(status=ExtractionStatus.NOT_ATTEMPTED)

    @classmethod
    def attempt(
        cls, enabled: bool, extract: Callable[[T], DateCandidate], source: T
    ) -> "ExtractionOutcome":
        """Run ``extract(source)`` if enabled, capturing date errors."""
        if not enabled:
            return cls.not_attempted()
        try:
            return cls.succeeded(extract(source))
        except DateError as e:
            return cls.failed(e)


class DateResolver:
    """Resolve a single date for a file according to a policy."""

    def __init__(
        self,
        policy: ResolutionPolicy,
        validator: Optional[DateValidator] = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            policy: Which sources to use and the minimum year
            validator: Validator holding the run's "now" snapshot. A new one
                is created from the policy if not given.
        """
        self.policy = policy
        self.validator = validator or DateValidator(policy.minimum_year)
        self.name_extractor = NameDateExtractor(self.validator)
        self.metadata_extractor = MetadataDateExtractor()

    def resolve(self, entry: FileEntry) -> DateCandidate:
        """
        Resolve the date of a file.

        Args:
            entry: File to resolve

        Returns:
            The resolution date

        Raises:
            DateError: If no enabled source produced a date
            ExtractorsDisabledError: If the policy disables both sources
        """
        name_outcome = ExtractionOutcome.attempt(
            self.policy.use_name, self.name_extractor.extract, entry.file_name
        )
        metadata_outcome = ExtractionOutcome.attempt(
            self.policy.use_metadata,
            self.metadata_extractor.extract,
            Path(entry.path),
        )
        return self.reconcile(name_outcome, metadata_outcome)

    @staticmethod
    def reconcile(
        name_outcome: ExtractionOutcome, metadata_outcome: ExtractionOutcome
    ) -> DateCandidate:
        """
        Combine the outcomes of the two extractors.

        Both succeeded: the earlier candidate. One succeeded: that candidate.
        Both failed: the filename error. A failed or skipped extractor never
        takes part in the comparison.
        """
        succeeded = [
            outcome.candidate
            for outcome in (name_outcome, metadata_outcome)
            if outcome.status == ExtractionStatus.SUCCEEDED
        ]
        if succeeded:
            # min() keeps the first on ties, so the filename wins a tie
            return min(succeeded, key=lambda c: c.date)

        for outcome in (name_outcome, metadata_outcome):
            if outcome.status == ExtractionStatus.FAILED:
                raise outcome.error

        raise ExtractorsDisabledError()
