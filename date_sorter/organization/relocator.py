"""
Relocation of files into their date directories.

Moves never overwrite: a file already at its destination is reported as
already sorted, and an occupied destination is reported as a collision.
"""

import logging
import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import FileEntry
from ..shared.file_utils import display_path

logger = logging.getLogger(__name__)


class RelocationStatus(str, Enum):
    """Outcome of relocating a single file."""

    MOVED = "moved"
    ALREADY_SORTED = "already_sorted"
    COLLISION = "collision"
    FAILED = "failed"


class RelocationOutcome(BaseModel):
    """What happened to a single file."""

    status: RelocationStatus = Field(description="Outcome status")
    source: Path = Field(description="Source file path")
    destination: Optional[Path] = Field(
        default=None, description="Destination file path"
    )
    reason: Optional[str] = Field(default=None, description="Failure reason")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def moved(cls, source: Path, destination: Path) -> "RelocationOutcome":
        return cls(
            status=RelocationStatus.MOVED, source=source, destination=destination
        )

    @classmethod
    def already_sorted(cls, path: Path) -> "RelocationOutcome":
        return cls(
            status=RelocationStatus.ALREADY_SORTED, source=path, destination=path
        )

    @classmethod
    def collision(cls, source: Path, destination: Path) -> "RelocationOutcome":
        return cls(
            status=RelocationStatus.COLLISION, source=source, destination=destination
        )

    @classmethod
    def failed(cls, path: Path, reason: str) -> "RelocationOutcome":
        return cls(status=RelocationStatus.FAILED, source=path, reason=reason)

    def describe(self) -> str:
        """Format the outcome as a single report line."""
        source = display_path(self.source)
        if self.status == RelocationStatus.MOVED:
            return f"{source}: Moved to {display_path(self.destination)}"
        elif self.status == RelocationStatus.ALREADY_SORTED:
            return f"{source}: Already sorted"
        elif self.status == RelocationStatus.COLLISION:
            return f"{source}: Target already exists"
        return f"{source}: {self.reason}"


def _same_path(first: Path, second: Path) -> bool:
    return os.path.abspath(first) == os.path.abspath(second)


class Relocator:
    """Move files below an output directory."""

    def __init__(self, output_directory: Path, dry_run: bool = False) -> None:
        """
        Initialize relocator.

        Args:
            output_directory: Root that relative target directories are joined to
            dry_run: If True, report outcomes without touching the filesystem
        """
        self.output_directory = Path(output_directory)
        self.dry_run = dry_run

    def relocate(self, entry: FileEntry, relative_directory: str) -> RelocationOutcome:
        """
        Move a file into a directory below the output directory.

        Args:
            entry: File to move
            relative_directory: Slash separated directory relative to the output

        Returns:
            Relocation outcome
        """
        source = Path(entry.path)
        target_dir = self.output_directory / relative_directory

        if not self.dry_run:
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.debug(f"Could not create {target_dir}: {e}")
                return RelocationOutcome.failed(source, str(e))

        target_path = target_dir / entry.file_name

        if _same_path(target_path, source):
            logger.debug(f"Skipping {source}: already sorted")
            return RelocationOutcome.already_sorted(source)

        # A dangling symlink also counts as occupied
        if os.path.lexists(target_path):
            logger.debug(f"Skipping {source}: {target_path} already exists")
            return RelocationOutcome.collision(source, target_path)

        if self.dry_run:
            logger.info(f"[DRY RUN] Would move {source} → {target_path}")
            return RelocationOutcome.moved(source, target_path)

        try:
            shutil.move(str(source), str(target_path))
        except OSError as e:
            # A failed cross-device copy may leave a partial target behind
            if source.exists() and target_path.exists():
                target_path.unlink()
            logger.debug(f"Error moving {source}: {e}")
            return RelocationOutcome.failed(source, str(e))

        logger.info(f"Moved {source} → {target_path}")
        return RelocationOutcome.moved(source, target_path)
