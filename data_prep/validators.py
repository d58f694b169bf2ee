"""
Data quality validation for the combined eligible-institutions table.

Catches problems before export:
- Missing canonical columns
- Null institution names or UnitIDs
- Repeated (UnitID, year, sheet) keys
- Eligibility values outside the known vocabulary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import pandas as pd

from core.schema import (
    CANONICAL_COLUMNS,
    ELIGIBILITY_VOCABULARY,
    GENERAL_ELIGIBILITY,
    INSTITUTION_NAME,
    STATUTORY_SHEETS,
    UNIT_ID,
)
from core.utils import leading_token


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a combined table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_eligible(
    eligible: pd.DataFrame,
    *,
    columns: Tuple[str, ...] = CANONICAL_COLUMNS,
    vocabulary: Tuple[str, ...] = ELIGIBILITY_VOCABULARY,
) -> ValidationResult:
    """
    Run all checks on the combined table.
    Returns a ValidationResult with errors and warnings; the runner logs both.

    Schema and identity errors only fire on frames built outside
    aggregate_eligible: the aggregator always emits the canonical columns and
    the reconciler has already dropped rows without Institution Name or UnitID.
    """
    result = ValidationResult()

    # --- Schema ---
    missing = [c for c in columns if c not in eligible.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result  # can't continue without columns

    if len(eligible) == 0:
        result.warnings.append("Combined table is empty (0 rows).")
        return result

    # --- Identity ---
    for col in (INSTITUTION_NAME, UNIT_ID):
        n_null = int(eligible[col].isna().sum())
        if n_null > 0:
            result.errors.append(f"{n_null} rows have null {col}.")

    # Same institution twice on one sheet in one year usually means a
    # duplicated row in the source.
    n_dup = int(eligible.duplicated(subset=[UNIT_ID, "year", "sheet"]).sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate (UnitID, year, sheet) keys found.")

    # --- Eligibility vocabulary (generic sheets only) ---
    statutory = eligible["sheet"].map(lambda s: leading_token(s) in STATUTORY_SHEETS)
    generic_values = eligible.loc[~statutory.astype(bool), GENERAL_ELIGIBILITY]
    unknown = sorted({str(v) for v in generic_values.dropna() if v not in vocabulary})
    if unknown:
        result.warnings.append(
            f"{len(unknown)} unrecognised GENERAL ELIGIBILITY values: {unknown}"
        )

    return result
