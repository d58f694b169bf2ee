"""
Eligibility predicate for generic (non-statutory) sheets.

A row is eligible when GENERAL ELIGIBILITY is exactly "Yes" or starts with
"Elig" ("Eligible, via IPEDS data", "Eligible, Application Approved", ...).
"Ineligible, but Receives FCS Waiver" stays out: a cost-share waiver is not
program eligibility.
"""

from __future__ import annotations

import pandas as pd

from core.schema import GENERAL_ELIGIBILITY

ELIGIBLE_VALUE = "Yes"
ELIGIBLE_PREFIX = "Elig"


def is_eligible(value) -> bool:
    if not isinstance(value, str):
        return False
    return value == ELIGIBLE_VALUE or value.startswith(ELIGIBLE_PREFIX)


def eligible_mask(df: pd.DataFrame, *, column: str = GENERAL_ELIGIBILITY) -> pd.Series:
    return df[column].map(is_eligible).astype(bool)


def filter_eligible(df: pd.DataFrame, *, column: str = GENERAL_ELIGIBILITY) -> pd.DataFrame:
    """Rows passing the predicate, original order kept."""
    if len(df) == 0:
        return df.copy()
    return df.loc[eligible_mask(df, column=column)].reset_index(drop=True)
