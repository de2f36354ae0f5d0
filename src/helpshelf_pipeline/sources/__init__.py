"""
helpshelf_pipeline.sources - Data source readers.

    from helpshelf_pipeline.sources import SpreadsheetSource
"""

from helpshelf_pipeline.sources.base import BaseSource
from helpshelf_pipeline.sources.spreadsheet import SpreadsheetSource

__all__ = [
    "BaseSource",
    "SpreadsheetSource",
]
