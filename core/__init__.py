"""
Core package: schema vocabulary, configuration, errors, and shared utilities.
No pipeline logic lives here.
"""

from .schema import CANONICAL_COLUMNS, SheetCategory
from .config import PipelineConfig
from .errors import (
    EligibilityPipelineError,
    SchemaMismatch,
    SourceUnavailable,
    UnsupportedSheet,
)
from .registry import TableKey, TableRegistry
from .utils import require_columns
from .logging_setup import setup_logging

__all__ = [
    "CANONICAL_COLUMNS",
    "SheetCategory",
    "PipelineConfig",
    "EligibilityPipelineError",
    "SchemaMismatch",
    "SourceUnavailable",
    "UnsupportedSheet",
    "TableKey",
    "TableRegistry",
    "require_columns",
    "setup_logging",
]
