"""
Data preparation: normalizing raw sheet grids, provenance tagging, validation.
"""

from .normalizer import fix_header_spelling, normalize_raw_sheet
from .tagger import tag_table
from .validators import ValidationResult, validate_eligible

__all__ = [
    "fix_header_spelling",
    "normalize_raw_sheet",
    "tag_table",
    "ValidationResult",
    "validate_eligible",
]
