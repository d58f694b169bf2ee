"""
Pipeline run configuration.
Sheet vocabularies live in core/schema.py.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

from core.schema import EXCLUDED_SHEETS, SOURCE_BASE_URL, SOURCE_FILES, SheetCategory


def _today() -> dt.date:
    return dt.date.today()


@dataclass(frozen=True)
class PipelineConfig:
    current_year: int = field(default_factory=lambda: _today().year)
    number_of_past_years: int = 2  # year 0 is the current year

    files: Tuple[str, ...] = SOURCE_FILES
    base_url: str = SOURCE_BASE_URL
    excluded_sheets: Tuple[str, ...] = EXCLUDED_SHEETS

    # sheet name -> category, for sheets the built-in mapping doesn't know
    extra_sheet_categories: Dict[str, SheetCategory] = field(default_factory=dict)
    # sheet name -> statutory list code ("HBCU", "TCCU") for renamed statutory sheets
    extra_statutory_codes: Dict[str, str] = field(default_factory=dict)

    request_timeout: float = 30.0

    # output locations
    output_root: Path = field(default_factory=lambda: Path("~/Downloads").expanduser())
    run_date: dt.date = field(default_factory=_today)
    save_downloads: bool = True
    export_intermediates: bool = False

    def years(self) -> Tuple[int, ...]:
        """Current year first, then each prior year."""
        if self.number_of_past_years < 0:
            raise ValueError("number_of_past_years must be >= 0.")
        return tuple(self.current_year - i for i in range(self.number_of_past_years + 1))

    @property
    def download_dir(self) -> Path:
        return Path(self.output_root) / f"DeptOfEduEligibilityMatrix_download_{self.run_date:%Y-%m-%d}"

    @property
    def export_dir(self) -> Path:
        return Path(self.output_root) / f"DeptOfEduEligibilityMatrix_export_transform{self.run_date:%Y-%m-%d}"
