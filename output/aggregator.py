"""
Union reconciled sheet tables into the combined eligible-institutions table.

Order of the combined table:
  1. HBCU rows (arrival order), all of them
  2. TCCU rows (arrival order), all of them
  3. generic-sheet rows passing the eligibility predicate (arrival order)

No deduplication: the same UnitID legitimately recurs across years and
sheets. Consumers needing a key should use (UnitID, year, sheet).
"""

from __future__ import annotations

from typing import Dict, Iterable

import pandas as pd

from core.registry import TableRegistry
from core.schema import CANONICAL_COLUMNS
from core.utils import empty_canonical_frame
from reconcile.eligibility import filter_eligible
from reconcile.reconciler import ReconciledTables


def combine_bucket(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """Concatenate canonical frames in order; always returns the six columns."""
    parts = [f for f in frames if len(f) > 0]
    if not parts:
        return empty_canonical_frame()
    out = pd.concat(parts, ignore_index=True)
    return out.loc[:, list(CANONICAL_COLUMNS)]


def aggregate_eligible(reconciled: ReconciledTables) -> pd.DataFrame:
    """Statutory buckets unconditionally, then the filtered generic bucket."""
    parts = [combine_bucket(reconciled.statutory[code]) for code in reconciled.statutory_order()]
    parts.append(filter_eligible(combine_bucket(reconciled.generic)))
    return combine_bucket(parts)


def intermediate_tables(
    registry: TableRegistry,
    reconciled: ReconciledTables,
) -> Dict[str, pd.DataFrame]:
    """
    Named intermediate tables, in export order:
    each tagged sheet as '<datafile>_<sheet>', then each statutory union
    ('HBCU', 'TCCU') and the unfiltered generic union 'ELIGIBILITY'.
    """
    tables: Dict[str, pd.DataFrame] = dict(registry.named_tables())
    for code in reconciled.statutory_order():
        tables[code] = combine_bucket(reconciled.statutory[code])
    tables["ELIGIBILITY"] = combine_bucket(reconciled.generic)
    return tables
