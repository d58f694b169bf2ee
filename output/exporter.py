from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Mapping

import pandas as pd

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\r\n]+')


class TableExporter:
    """Interface: persist one named table."""

    def write(self, name: str, df: pd.DataFrame) -> Path:
        raise NotImplementedError


class CsvExporter(TableExporter):
    """Writes '<name>.csv' files (header row, no index, blanks for missing)."""

    def __init__(self, export_dir: Path) -> None:
        self.export_dir = Path(export_dir)

    def path_for(self, name: str) -> Path:
        return self.export_dir / f"{_UNSAFE_CHARS.sub('_', name)}.csv"

    def write(self, name: str, df: pd.DataFrame) -> Path:
        self.export_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name)
        df.to_csv(path, index=False, encoding="utf-8")
        logger.info("Wrote %s (%d rows)", path, len(df))
        return path


def export_tables(exporter: TableExporter, tables: Mapping[str, pd.DataFrame]) -> List[Path]:
    return [exporter.write(name, df) for name, df in tables.items()]
