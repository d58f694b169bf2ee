from __future__ import annotations

import pandas as pd

from core.schema import PROVENANCE_COLUMNS


def tag_table(df: pd.DataFrame, *, year: int, datafile: str, sheet: str) -> pd.DataFrame:
    """Return a copy with year/datafile/sheet provenance on every row (tags win over existing columns)."""
    out = df.copy()
    for col, value in zip(PROVENANCE_COLUMNS, (int(year), datafile, sheet)):
        out[col] = value
    return out
