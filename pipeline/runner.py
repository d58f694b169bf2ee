"""
Pipeline runner: fetch, normalize, tag, reconcile, aggregate, validate, export.

Everything runs sequentially in a fixed order (years from the current one
backwards, files in configured order, sheets in workbook order), so two runs
over the same sources produce the same combined table.

Error policy:
  SourceUnavailable  logged, that (year, file) is skipped
  SchemaMismatch     propagates; the run fails rather than export a partial set
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from core.config import PipelineConfig
from core.errors import SourceUnavailable
from core.logging_setup import setup_logging
from core.registry import TableKey, TableRegistry
from data_prep.normalizer import normalize_raw_sheet
from data_prep.tagger import tag_table
from data_prep.validators import ValidationResult, validate_eligible
from output.aggregator import aggregate_eligible, intermediate_tables
from output.exporter import CsvExporter, TableExporter, export_tables
from reconcile.reconciler import ReconciledTables, reconcile_registry
from sources.fetcher import HttpSourceFetcher, SourceFetcher, SourceFile, source_files
from sources.loader import ExcelSheetLoader, SheetLoader

logger = logging.getLogger(__name__)

ELIGIBLE_TABLE = "ELIGIBLE"


@dataclass
class LoadReport:
    fetched: List[SourceFile] = field(default_factory=list)
    skipped: List[SourceFile] = field(default_factory=list)


@dataclass
class PipelineResult:
    eligible: pd.DataFrame
    registry: TableRegistry
    reconciled: ReconciledTables
    validation: ValidationResult
    load_report: LoadReport
    exported: List[Path] = field(default_factory=list)


def load_sources(
    config: PipelineConfig,
    fetcher: SourceFetcher,
    loader: SheetLoader,
    *,
    registry: Optional[TableRegistry] = None,
) -> Tuple[TableRegistry, LoadReport]:
    """Fetch every configured workbook and register one tagged table per sheet."""
    registry = registry if registry is not None else TableRegistry()
    report = LoadReport()

    for src in source_files(config):
        try:
            content = fetcher.fetch(src.filename)
        except SourceUnavailable as e:
            logger.info("Skipping %s: %s", src.filename, e.reason)
            report.skipped.append(src)
            continue
        report.fetched.append(src)

        for sheet, grid in loader.iter_sheets(content):
            table = normalize_raw_sheet(grid)
            tagged = tag_table(table, year=src.year, datafile=src.datafile, sheet=sheet)
            registry.register(TableKey(src.year, src.datafile, sheet), tagged)
            logger.info("Loaded %s / %s: %d rows", src.datafile, sheet, len(tagged))

    return registry, report


def run_pipeline(
    config: Optional[PipelineConfig] = None,
    *,
    fetcher: Optional[SourceFetcher] = None,
    loader: Optional[SheetLoader] = None,
    exporter: Optional[TableExporter] = None,
) -> PipelineResult:
    """
    Run the whole pipeline once.

    Parameters
    ----------
    config : PipelineConfig, optional
        Run settings; defaults to the current year plus two prior years.
    fetcher : SourceFetcher, optional
        Defaults to HttpSourceFetcher against config.base_url.
    loader : SheetLoader, optional
        Defaults to ExcelSheetLoader excluding config.excluded_sheets.
    exporter : TableExporter, optional
        When given, ELIGIBLE (and intermediates if config.export_intermediates)
        are written through it. Nothing is written otherwise.

    Raises
    ------
    SchemaMismatch
        A sheet lacks the columns its strategy needs, or has no strategy.
    """
    config = config if config is not None else PipelineConfig()
    fetcher = fetcher if fetcher is not None else HttpSourceFetcher.from_config(config)
    loader = loader if loader is not None else ExcelSheetLoader(excluded_sheets=config.excluded_sheets)

    logger.info("Eligibility run for years %s", list(config.years()))
    registry, report = load_sources(config, fetcher, loader)
    logger.info(
        "Loaded %d sheets from %d files (%d skipped)",
        len(registry), len(report.fetched), len(report.skipped),
    )

    reconciled = reconcile_registry(
        registry,
        extra_categories=config.extra_sheet_categories,
        statutory_codes=config.extra_statutory_codes,
    )
    eligible = aggregate_eligible(reconciled)
    logger.info("Combined table: %d eligible rows", len(eligible))

    validation = validate_eligible(eligible)
    for line in validation.summary().splitlines():
        logger.info(line)

    exported: List[Path] = []
    if exporter is not None:
        if config.export_intermediates:
            exported.extend(export_tables(exporter, intermediate_tables(registry, reconciled)))
        exported.append(exporter.write(ELIGIBLE_TABLE, eligible))

    return PipelineResult(
        eligible=eligible,
        registry=registry,
        reconciled=reconciled,
        validation=validation,
        load_report=report,
        exported=exported,
    )


def main() -> int:
    setup_logging()
    config = PipelineConfig()
    result = run_pipeline(config, exporter=CsvExporter(config.export_dir))
    logger.info("Done: %d eligible rows written to %s", len(result.eligible), config.export_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
