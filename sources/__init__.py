"""
Sources: fetching the agency's workbooks and reading their sheets.
"""

from .fetcher import HttpSourceFetcher, SourceFetcher, SourceFile, source_files
from .loader import ExcelSheetLoader, SheetLoader

__all__ = [
    "HttpSourceFetcher",
    "SourceFetcher",
    "SourceFile",
    "source_files",
    "ExcelSheetLoader",
    "SheetLoader",
]
