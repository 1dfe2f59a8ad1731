"""
File organizer for sorting files into date directories.

Runs the per-file pipeline: resolve a date, build the target directory,
and relocate the file. Errors are reported per file and never stop the run.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from pydantic import BaseModel, Field

from ..core.date_validation import DateValidator
from ..core.errors import DateError, ExtractorsDisabledError
from ..core.resolver import DateResolver
from ..core.types import FileEntry, ResolutionPolicy
from .relocator import RelocationOutcome, RelocationStatus, Relocator
from .strategy import NamingPolicy

logger = logging.getLogger(__name__)


class OrganizationResult(BaseModel):
    """Result of an organization run."""

    total_files: int = 0
    moved: int = 0
    already_sorted: int = 0
    collisions: int = 0
    failed: int = 0
    dry_run: bool = False
    outcomes: List[RelocationOutcome] = Field(default_factory=list)

    def record(self, outcome: RelocationOutcome) -> None:
        """Add an outcome to the statistics."""
        self.total_files += 1
        self.outcomes.append(outcome)
        if outcome.status == RelocationStatus.MOVED:
            self.moved += 1
        elif outcome.status == RelocationStatus.ALREADY_SORTED:
            self.already_sorted += 1
        elif outcome.status == RelocationStatus.COLLISION:
            self.collisions += 1
        else:
            self.failed += 1

    @property
    def errors(self) -> List[str]:
        """Report lines for failed files."""
        return [
            outcome.describe()
            for outcome in self.outcomes
            if outcome.status == RelocationStatus.FAILED
        ]


class FileOrganizer:
    """Organize files into date directories."""

    def __init__(
        self,
        resolution_policy: ResolutionPolicy,
        naming_policy: NamingPolicy,
        output_directory: Path,
        dry_run: bool = False,
        validator: Optional[DateValidator] = None,
    ):
        """
        Initialize file organizer.

        Args:
            resolution_policy: Which date sources to use
            naming_policy: How to name target directories
            output_directory: Root of the date directories
            dry_run: If True, preview moves without executing
            validator: Validator for the run; created from the policy if None

        Raises:
            ExtractorsDisabledError: If the policy disables every date source
        """
        if not (resolution_policy.use_name or resolution_policy.use_metadata):
            raise ExtractorsDisabledError()

        self.resolution_policy = resolution_policy
        self.naming_policy = naming_policy
        self.output_directory = Path(output_directory)
        self.dry_run = dry_run
        self.resolver = DateResolver(resolution_policy, validator)
        self.relocator = Relocator(self.output_directory, dry_run=dry_run)

    def process_entry(self, entry: FileEntry) -> RelocationOutcome:
        """
        Sort a single file.

        Args:
            entry: File to sort

        Returns:
            Relocation outcome; failures are returned rather than raised
        """
        try:
            candidate = self.resolver.resolve(entry)
            target_dir = self.naming_policy.get_target_directory(candidate.date)
            logger.debug(
                f"{entry.path}: resolved {candidate.date.format('YYYY-MM-DD')} "
                f"({candidate.source.value}) → {target_dir}"
            )
            return self.relocator.relocate(entry, target_dir)
        except (DateError, OSError) as e:
            logger.debug(f"Error processing {entry.path}: {e}")
            return RelocationOutcome.failed(Path(entry.path), str(e))

    def organize(
        self,
        entries: Iterable[FileEntry],
        on_outcome: Optional[Callable[[RelocationOutcome], None]] = None,
    ) -> OrganizationResult:
        """
        Sort every file entry.

        Args:
            entries: File entries, consumed lazily
            on_outcome: Called with each outcome as soon as it is known

        Returns:
            Organization result with statistics
        """
        logger.info(f"Starting organization ({'DRY RUN' if self.dry_run else 'LIVE'})")

        result = OrganizationResult(dry_run=self.dry_run)

        for entry in entries:
            if not entry.is_file:
                continue
            outcome = self.process_entry(entry)
            result.record(outcome)
            if on_outcome:
                on_outcome(outcome)

        logger.info(
            f"Processed {result.total_files} files: {result.moved} moved, "
            f"{result.already_sorted} already sorted, "
            f"{result.collisions} collisions, {result.failed} failed"
        )
        return result
