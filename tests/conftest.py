from __future__ import annotations

from io import BytesIO
from typing import Dict, List, Optional, Sequence

import pandas as pd
import pytest

from core.config import PipelineConfig
from core.errors import SourceUnavailable
from sources.fetcher import SourceFetcher

HBCU_INDICATOR = "HBCU/\r\nHBGI"
GENERIC_HEADER = ["Institution Name", "UnitID", "State", "GENERAL ELIGIBILITY"]


def make_grid(rows: Sequence[Sequence]) -> pd.DataFrame:
    """Raw sheet grid with positional columns, as a loader yields it."""
    return pd.DataFrame([list(r) for r in rows], dtype=object)


def sheet_rows(header: List[str], records: Sequence[Sequence], banner: Optional[str] = "Eligibility criteria") -> List[List]:
    """Banner row (blank first cell), header row, then records."""
    rows: List[List] = []
    if banner is not None:
        rows.append([None, banner] + [None] * (len(header) - 2))
    rows.append(list(header))
    rows.extend(list(r) for r in records)
    return rows


def build_workbook(sheets: Dict[str, List[List]], title: str = "FY Eligibility Matrix") -> bytes:
    """xlsx bytes; every sheet gets a one-line title above the given rows."""
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            width = max((len(r) for r in rows), default=1)
            grid = [[title] + [None] * (width - 1)] + [list(r) + [None] * (width - len(r)) for r in rows]
            pd.DataFrame(grid).to_excel(writer, sheet_name=name, header=False, index=False)
    return bio.getvalue()


class InMemoryFetcher(SourceFetcher):
    def __init__(self, files: Dict[str, bytes]) -> None:
        self.files = files
        self.requested: List[str] = []

    def fetch(self, filename: str) -> bytes:
        self.requested.append(filename)
        if filename not in self.files:
            raise SourceUnavailable(filename, "HTTP 404")
        return self.files[filename]


@pytest.fixture
def config_2023(tmp_path) -> PipelineConfig:
    return PipelineConfig(current_year=2023, number_of_past_years=0, output_root=tmp_path)


@pytest.fixture
def matrix_2023() -> bytes:
    """2023 matrix: HSI (InstA Yes, InstB No, InstC Eligible...) and HBCU (InstD Y)."""
    return build_workbook({
        "HSI": sheet_rows(GENERIC_HEADER, [
            ["InstA", 100001, "TX", "Yes"],
            ["InstB", 100002, "CA", "No"],
            ["InstC", 100003, "NM", "Eligible, Application Approved"],
        ]),
        "HBCU": sheet_rows(["Institution Name", "UnitID", "State", HBCU_INDICATOR], [
            ["InstD", 100004, "GA", "Y"],
        ]),
        "Program Interactions": [["Program", "Can also receive"], ["HSI", "SIP"]],
    })
