from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

import pandas as pd

from core.errors import SchemaMismatch
from core.schema import CANONICAL_COLUMNS

# openpyxl can leave the xlsx escape for a carriage return in header text.
_CR_ESCAPE = "_x000D_"
_WS_RE = re.compile(r"\s+")


def require_columns(
    df: pd.DataFrame,
    cols: Iterable[str],
    *,
    key: Optional[Tuple] = None,
) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise SchemaMismatch(missing, key=key)


def is_blank(value) -> bool:
    """True for missing cells and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def label_key(label) -> str:
    """Compare header labels ignoring line breaks and other whitespace."""
    text = str(label).replace(_CR_ESCAPE, "")
    return _WS_RE.sub("", text).upper()


def leading_token(name: str) -> str:
    """First alphanumeric token of a sheet name, upper-cased ('HSI ' -> 'HSI')."""
    m = re.match(r"\s*([A-Za-z0-9]+)", str(name))
    return m.group(1).upper() if m else ""


def empty_canonical_frame() -> pd.DataFrame:
    return pd.DataFrame(columns=list(CANONICAL_COLUMNS))
