"""Season calendar and spreadsheet classification for apparel pricing imports."""

__version__ = "0.1.0"
