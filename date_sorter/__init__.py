"""
Date Sorter.

Organizes files into a date-based directory hierarchy using dates found in
filenames and filesystem timestamps.
"""

__version__ = "1.0.0"
