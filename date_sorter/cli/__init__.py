"""Command line interface for Date Sorter."""
