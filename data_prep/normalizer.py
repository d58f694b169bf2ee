"""
Turn one raw sheet grid into a table with real column labels.

Published sheets stack title/banner rows above the header row; those rows
have nothing in the first column, which is how they are told apart from the
header and the institution rows.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from core.schema import HEADER_SPELLING_FIXES
from core.utils import is_blank


def _header_label(value) -> str:
    return "" if is_blank(value) else str(value)


def fix_header_spelling(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with known header misspellings corrected. Idempotent.

    When both spellings are present the misspelled column's values win and
    gaps are filled from the correctly spelled one.
    """
    out = df.copy()
    for wrong, right in HEADER_SPELLING_FIXES.items():
        if wrong not in out.columns:
            continue
        if right in out.columns:
            out[right] = out[wrong].combine_first(out[right])
            out = out.drop(columns=[wrong])
        else:
            out = out.rename(columns={wrong: right})
    return out


def normalize_raw_sheet(grid: pd.DataFrame) -> pd.DataFrame:
    """
    Drop rows with an empty first cell, promote the first remaining row to
    column labels, and fix known header misspellings.

    A grid with nothing left after the drop yields an empty frame; a grid with
    only a header row yields an empty frame with those columns.
    """
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        return pd.DataFrame()

    keep = ~grid.iloc[:, 0].map(is_blank).astype(bool)
    rows = grid.loc[keep.to_numpy()]
    if rows.empty:
        return pd.DataFrame()

    header: List[str] = [_header_label(v) for v in rows.iloc[0].tolist()]
    body = rows.iloc[1:].reset_index(drop=True)
    body.columns = header
    return fix_header_spelling(body)
