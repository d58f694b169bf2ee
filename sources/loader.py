from __future__ import annotations

import logging
from io import BytesIO
from typing import Iterable, Iterator, List, Tuple

import pandas as pd

from core.schema import EXCLUDED_SHEETS

logger = logging.getLogger(__name__)


class SheetLoader:
    """Interface: enumerate data sheets of a workbook and yield raw cell grids."""

    def iter_sheets(self, content: bytes) -> Iterator[Tuple[str, pd.DataFrame]]:
        raise NotImplementedError


def drop_title_row(grid: pd.DataFrame) -> pd.DataFrame:
    """
    Drop everything up to and including the first non-empty row.

    The published sheets open with a one-line title above the banner and
    header rows; that line is a caption, not data.
    """
    non_empty = grid.notna().any(axis=1).to_numpy()
    if not non_empty.any():
        return grid.iloc[0:0].reset_index(drop=True)
    first = int(non_empty.argmax())
    return grid.iloc[first + 1:].reset_index(drop=True)


class ExcelSheetLoader(SheetLoader):
    def __init__(
        self,
        *,
        excluded_sheets: Iterable[str] = EXCLUDED_SHEETS,
        skip_title_row: bool = True,
    ) -> None:
        self.excluded_sheets = tuple(excluded_sheets)
        self.skip_title_row = skip_title_row

    def sheet_names(self, content: bytes) -> List[str]:
        with pd.ExcelFile(BytesIO(content), engine="openpyxl") as xls:
            skipped = [s for s in xls.sheet_names if s in self.excluded_sheets]
            if skipped:
                logger.debug("Skipping non-data sheets: %s", skipped)
            return [s for s in xls.sheet_names if s not in self.excluded_sheets]

    def read_sheet(self, content: bytes, sheet_name: str) -> pd.DataFrame:
        grid = pd.read_excel(
            BytesIO(content),
            sheet_name=sheet_name,
            header=None,
            dtype=object,
            engine="openpyxl",
        )
        return drop_title_row(grid) if self.skip_title_row else grid

    def iter_sheets(self, content: bytes) -> Iterator[Tuple[str, pd.DataFrame]]:
        for name in self.sheet_names(content):
            yield name, self.read_sheet(content, name)
