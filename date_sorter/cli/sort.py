"""
CLI command for sorting files into date directories.

Finds a date for every file in INPUT from its filename and filesystem
timestamps, and moves it into a year/month directory below OUTPUT.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import Settings
from ..core.types import ResolutionPolicy
from ..organization import (
    DirectoryLayout,
    FileOrganizer,
    NamingPolicy,
    OrganizationResult,
    RelocationOutcome,
    RelocationStatus,
    remove_empty_directories,
)
from ..shared import display_path, setup_logging, walk_files

console = Console()


@click.command()
@click.argument("input_directory", type=click.Path(exists=True, file_okay=False))
@click.argument("output_directory", type=click.Path(file_okay=False))
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Prints messages for successful imports",
)
@click.option(
    "-n",
    "--name",
    is_flag=True,
    default=False,
    help="Only get the dates from the filenames",
)
@click.option(
    "-e",
    "--meta",
    is_flag=True,
    default=False,
    help="Only get the dates from the metadata",
)
@click.option(
    "-c",
    "--clean",
    is_flag=True,
    default=False,
    help="Remove empty directories from the input",
)
@click.option(
    "-l",
    "--limit",
    type=int,
    default=None,
    metavar="YEAR",
    help="The oldest possible year [default: 1950]",
)
@click.option(
    "-y",
    "--year",
    is_flag=True,
    default=False,
    help="Add year to the names of the monthly directories",
)
@click.option(
    "-m",
    "--month",
    type=click.Choice(["en", "swe"], case_sensitive=False),
    default=None,
    metavar="LANGUAGE",
    help="Add month names to the monthly directories (en, swe)",
)
@click.option(
    "-f",
    "--flat",
    is_flag=True,
    default=False,
    help="Flatten the directory structure (combine year and month)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview moves without changing any files",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.version_option(version=__version__)
def sort(
    input_directory: str,
    output_directory: str,
    verbose: bool,
    name: bool,
    meta: bool,
    clean: bool,
    limit: Optional[int],
    year: bool,
    month: Optional[str],
    flat: bool,
    dry_run: bool,
    debug: bool,
) -> None:
    """
    Sort files from INPUT_DIRECTORY into date directories in OUTPUT_DIRECTORY.

    Dates are taken from the filename (YYYY-MM-DD, YYYYMMDD, DD.MM.YYYY, ...)
    and from the file system timestamps; the earlier of the two is used.
    Files are never renamed or overwritten.

    \b
    Directory Structures:
        default:     2023/06/
        --year:      2023/2023 06/
        --flat:      2023 06/
        --month en:  2023/06 June/
    """
    setup_logging(verbose=debug, quiet=not debug)

    settings = Settings()

    resolution_policy = ResolutionPolicy(
        use_name=not meta or name,
        use_metadata=not name or meta,
        minimum_year=limit if limit is not None else settings.minimum_year,
    )

    if flat:
        layout = DirectoryLayout.FLAT.value
    elif year:
        layout = DirectoryLayout.YEAR.value
    else:
        layout = settings.layout.value
    naming_policy = NamingPolicy.from_tokens(
        layout, month.lower() if month else settings.month_language.value
    )

    input_dir = Path(input_directory)
    output_dir = Path(output_directory)

    organizer = FileOrganizer(
        resolution_policy=resolution_policy,
        naming_policy=naming_policy,
        output_directory=output_dir,
        dry_run=dry_run,
    )

    if dry_run:
        console.print("[yellow]⚠ DRY RUN MODE - No files will be modified[/yellow]")

    def report(outcome: RelocationOutcome) -> None:
        line = escape(outcome.describe())
        if outcome.status == RelocationStatus.FAILED:
            console.print(f"[red]{line}[/red]", highlight=False, soft_wrap=True)
        elif outcome.status == RelocationStatus.COLLISION:
            console.print(f"[yellow]{line}[/yellow]", highlight=False, soft_wrap=True)
        elif verbose:
            console.print(line, highlight=False, soft_wrap=True)

    result = organizer.organize(
        walk_files(input_dir, follow_symlinks=settings.follow_symlinks),
        on_outcome=report,
    )

    if clean and not dry_run:
        for removed in remove_empty_directories(input_dir):
            if verbose:
                console.print(
                    escape(f"{display_path(removed)}: Removed empty directory"),
                    highlight=False,
                    soft_wrap=True,
                )

    _display_result(result)


def _display_result(result: OrganizationResult) -> None:
    """Display organization result."""
    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total files", str(result.total_files))
    table.add_row("Moved", str(result.moved))
    table.add_row("Already sorted", str(result.already_sorted))
    table.add_row("Collisions", str(result.collisions))
    table.add_row("Failed", str(result.failed))

    console.print(table)

    if result.dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")


if __name__ == "__main__":
    sort()
