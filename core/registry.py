"""
In-memory registry of tagged sheet tables, keyed by (year, datafile, sheet).

Populated by the load loop and consumed by the reconciler. Iteration follows
registration order, which is the run's arrival order.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Tuple

import pandas as pd


class TableKey(NamedTuple):
    year: int
    datafile: str
    sheet: str

    @property
    def name(self) -> str:
        """Export name for the tagged table, e.g. '2023eligibilitymatrix_HSI'."""
        return f"{self.datafile}_{self.sheet}"


class TableRegistry:
    def __init__(self) -> None:
        self._tables: Dict[TableKey, pd.DataFrame] = {}

    def register(self, key: TableKey, table: pd.DataFrame) -> None:
        if key in self._tables:
            raise ValueError(f"Table already registered for {key}.")
        self._tables[key] = table

    def get(self, key: TableKey) -> pd.DataFrame:
        return self._tables[key]

    def __contains__(self, key) -> bool:
        return key in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[TableKey]:
        return iter(self._tables)

    def items(self) -> List[Tuple[TableKey, pd.DataFrame]]:
        return list(self._tables.items())

    def named_tables(self) -> Dict[str, pd.DataFrame]:
        return {key.name: table for key, table in self._tables.items()}
