"""
Output: aggregation of reconciled tables and CSV export.
"""

from .aggregator import aggregate_eligible, combine_bucket, intermediate_tables
from .exporter import CsvExporter, TableExporter, export_tables

__all__ = [
    "aggregate_eligible",
    "combine_bucket",
    "intermediate_tables",
    "CsvExporter",
    "TableExporter",
    "export_tables",
]
