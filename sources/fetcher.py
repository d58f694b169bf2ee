"""
Fetch-if-exists access to the published eligibility workbooks.

The agency publishes one workbook per (fiscal year, file) at a fixed URL.
Years that were never published come back as 403/404, or as an HTML landing
page with status 200. Those, and hosts that cannot be reached at all, are
reported as SourceUnavailable so the run skips that file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional

import requests

from core.config import PipelineConfig
from core.errors import SourceUnavailable

logger = logging.getLogger(__name__)

# .xlsx files are zip archives
_XLSX_MAGIC = b"PK\x03\x04"
# CDN-fronted hosts answer 403 for objects that were never published
_MISSING_STATUS = {403, 404, 410}


class SourceFile(NamedTuple):
    year: int
    file: str
    filename: str

    @property
    def datafile(self) -> str:
        """Logical name without extension, e.g. '2023eligibilitymatrix'."""
        return self.filename.rsplit(".xlsx", 1)[0]


def source_files(config: PipelineConfig) -> List[SourceFile]:
    """All (year, file) pairs for a run, current year first."""
    return [
        SourceFile(year, file, f"{year}{file}.xlsx")
        for year in config.years()
        for file in config.files
    ]


class SourceFetcher:
    """Interface: return workbook bytes or raise SourceUnavailable."""

    def fetch(self, filename: str) -> bytes:
        raise NotImplementedError


class HttpSourceFetcher(SourceFetcher):
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
        download_dir: Optional[Path] = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.download_dir = Path(download_dir) if download_dir is not None else None

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "HttpSourceFetcher":
        return cls(
            config.base_url,
            timeout=config.request_timeout,
            download_dir=config.download_dir if config.save_downloads else None,
        )

    def url_for(self, filename: str) -> str:
        return f"{self.base_url}{filename}"

    def fetch(self, filename: str) -> bytes:
        url = self.url_for(filename)
        logger.info("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.ConnectionError as e:
            raise SourceUnavailable(filename, f"connection failed: {e}") from e
        if response.status_code in _MISSING_STATUS:
            raise SourceUnavailable(filename, f"HTTP {response.status_code}")
        response.raise_for_status()

        content = response.content
        if not content.startswith(_XLSX_MAGIC):
            raise SourceUnavailable(filename, "response is not an xlsx workbook")

        if self.download_dir is not None:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            local_path = self.download_dir / filename
            local_path.write_bytes(content)
            logger.info("Saved %s (%d bytes)", local_path, len(content))
        return content
