"""
Project tagged sheet tables onto the six canonical columns.

Routing is by sheet name, never by file or year, so a new release with a
known layout needs no code change:

  statutory list (HBCU, TCCU)  the presence-indicator column becomes
                               GENERAL ELIGIBILITY; rows are not filtered.
  generic eligibility          the six canonical columns are selected as-is
                               and filtered later by reconcile/eligibility.py.
  unsupported                  UnsupportedSheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

import pandas as pd

from core.errors import SchemaMismatch, UnsupportedSheet
from core.registry import TableKey, TableRegistry
from core.schema import (
    CANONICAL_COLUMNS,
    GENERAL_ELIGIBILITY,
    INSTITUTION_NAME,
    SHEET_CATEGORIES,
    STATUTORY_INDICATOR_LABELS,
    STATUTORY_SHEETS,
    UNIT_ID,
    SheetCategory,
)
from core.utils import empty_canonical_frame, is_blank, label_key, leading_token, require_columns

logger = logging.getLogger(__name__)


def classify_sheet(
    sheet: str,
    extra_categories: Optional[Mapping[str, SheetCategory]] = None,
    statutory_codes: Optional[Mapping[str, str]] = None,
) -> SheetCategory:
    """Category of a sheet by its name ('HSI', 'HSI ', 'MSEIP Eligible' ...).

    Sheets named in statutory_codes are statutory lists whatever their name.
    """
    if statutory_codes and sheet in statutory_codes:
        return SheetCategory.STATUTORY_LIST
    if extra_categories and sheet in extra_categories:
        return extra_categories[sheet]
    return SHEET_CATEGORIES.get(leading_token(sheet), SheetCategory.UNSUPPORTED)


def statutory_code(sheet: str, statutory_codes: Optional[Mapping[str, str]] = None) -> str:
    """Statutory list a sheet belongs to: configured code, else the name's leading token."""
    if statutory_codes and sheet in statutory_codes:
        return statutory_codes[sheet].upper()
    return leading_token(sheet)


@dataclass
class ReconciledTables:
    """Canonical frames bucketed by category, each list in arrival order."""
    statutory: Dict[str, List[pd.DataFrame]] = field(
        default_factory=lambda: {code: [] for code in STATUTORY_SHEETS}
    )
    generic: List[pd.DataFrame] = field(default_factory=list)

    def add(self, category: SheetCategory, code: str, frame: pd.DataFrame) -> None:
        """Append a frame; code names the statutory list and is ignored for generic frames."""
        if category is SheetCategory.STATUTORY_LIST:
            self.statutory.setdefault(code, []).append(frame)
        elif category is SheetCategory.GENERIC_ELIGIBILITY:
            self.generic.append(frame)
        else:
            raise ValueError(f"Cannot bucket category {category!r}.")

    def statutory_order(self) -> List[str]:
        """HBCU, TCCU, then any configured extras in arrival order."""
        known = [c for c in STATUTORY_SHEETS if c in self.statutory]
        return known + [c for c in self.statutory if c not in STATUTORY_SHEETS]


def _find_indicator_column(df: pd.DataFrame, code: str, key: Optional[TableKey]) -> str:
    labels = STATUTORY_INDICATOR_LABELS.get(code, ())
    wanted = {label_key(label) for label in labels}
    matches = [c for c in df.columns if label_key(c) in wanted]
    if not matches:
        expected = labels[0] if labels else f"{code} List"
        raise SchemaMismatch(
            [expected],
            key=key,
            message=f"No {code} list indicator column (looked for {list(labels)})",
        )
    if len(matches) > 1:
        raise SchemaMismatch(
            [],
            key=key,
            message=f"Ambiguous {code} list indicator columns: {matches}",
        )
    return matches[0]


def _drop_unidentified_rows(df: pd.DataFrame, key: Optional[TableKey]) -> pd.DataFrame:
    """Drop rows with no institution name or UnitID (footnotes, totals)."""
    blank = df[INSTITUTION_NAME].map(is_blank).astype(bool) | df[UNIT_ID].map(is_blank).astype(bool)
    n_blank = int(blank.sum())
    if n_blank:
        logger.info("%s: dropped %d rows without Institution Name/UnitID", key, n_blank)
    return df.loc[~blank].reset_index(drop=True)


def select_canonical_columns(df: pd.DataFrame, *, key: Optional[TableKey] = None) -> pd.DataFrame:
    """Return a copy containing ONLY the canonical columns, in canonical order."""
    require_columns(df, CANONICAL_COLUMNS, key=key)
    out = df.loc[:, list(CANONICAL_COLUMNS)].copy()
    return _drop_unidentified_rows(out, key)


def reconcile_statutory(df: pd.DataFrame, code: str, *, key: Optional[TableKey] = None) -> pd.DataFrame:
    indicator = _find_indicator_column(df, code, key)
    out = df
    if indicator != GENERAL_ELIGIBILITY and GENERAL_ELIGIBILITY in out.columns:
        out = out.drop(columns=[GENERAL_ELIGIBILITY])
    out = out.rename(columns={indicator: GENERAL_ELIGIBILITY})
    return select_canonical_columns(out, key=key)


def reconcile_generic(df: pd.DataFrame, *, key: Optional[TableKey] = None) -> pd.DataFrame:
    return select_canonical_columns(df, key=key)


def reconcile_table(
    df: pd.DataFrame,
    key: TableKey,
    *,
    extra_categories: Optional[Mapping[str, SheetCategory]] = None,
    statutory_codes: Optional[Mapping[str, str]] = None,
) -> Tuple[SheetCategory, pd.DataFrame]:
    """
    Route one tagged table to its strategy.

    Sheets without data rows contribute an empty canonical frame whatever
    their header looks like.
    """
    category = classify_sheet(key.sheet, extra_categories, statutory_codes)
    if len(df) == 0:
        logger.info("%s: no data rows", key)
        return category, empty_canonical_frame()

    if category is SheetCategory.STATUTORY_LIST:
        code = statutory_code(key.sheet, statutory_codes)
        return category, reconcile_statutory(df, code, key=key)
    if category is SheetCategory.GENERIC_ELIGIBILITY:
        return category, reconcile_generic(df, key=key)
    raise UnsupportedSheet(key.sheet, key=key)


def reconcile_registry(
    registry: TableRegistry,
    *,
    extra_categories: Optional[Mapping[str, SheetCategory]] = None,
    statutory_codes: Optional[Mapping[str, str]] = None,
) -> ReconciledTables:
    """Reconcile every registered table, in registration order."""
    reconciled = ReconciledTables()
    for key, table in registry.items():
        category, frame = reconcile_table(
            table, key, extra_categories=extra_categories, statutory_codes=statutory_codes,
        )
        if category is SheetCategory.UNSUPPORTED:
            logger.warning("%s: skipping empty sheet with unknown layout", key)
            continue
        reconciled.add(category, statutory_code(key.sheet, statutory_codes), frame)
    return reconciled
