"""
Pipeline error taxonomy.

SourceUnavailable is absorbed by the runner (the file is skipped).
SchemaMismatch propagates so a run never silently produces a partial dataset.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class EligibilityPipelineError(Exception):
    """Base class for errors raised by the eligibility pipeline."""


class SourceUnavailable(EligibilityPipelineError):
    """A requested source workbook does not exist remotely."""

    def __init__(self, filename: str, reason: str = "not found") -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")


class SchemaMismatch(EligibilityPipelineError):
    """A sheet is missing columns its reconciliation strategy requires."""

    def __init__(
        self,
        missing: Sequence[str],
        *,
        key: Optional[Tuple] = None,
        message: Optional[str] = None,
    ) -> None:
        self.missing = list(missing)
        self.key = key
        if message is None:
            message = f"Missing required columns: {self.missing}"
        if key is not None:
            message = f"{message} (year={key[0]}, datafile={key[1]!r}, sheet={key[2]!r})"
        super().__init__(message)


class UnsupportedSheet(SchemaMismatch):
    """A sheet name with no known reconciliation strategy."""

    def __init__(self, sheet: str, *, key: Optional[Tuple] = None) -> None:
        self.sheet = sheet
        super().__init__(
            [],
            key=key,
            message=f"No reconciliation strategy for sheet {sheet!r}",
        )
