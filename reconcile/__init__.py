"""
Reconciliation: sheet routing, canonical projection, eligibility predicate.
"""

from .reconciler import (
    ReconciledTables,
    classify_sheet,
    reconcile_registry,
    reconcile_table,
    select_canonical_columns,
)
from .eligibility import eligible_mask, filter_eligible, is_eligible

__all__ = [
    "ReconciledTables",
    "classify_sheet",
    "reconcile_registry",
    "reconcile_table",
    "select_canonical_columns",
    "eligible_mask",
    "filter_eligible",
    "is_eligible",
]
