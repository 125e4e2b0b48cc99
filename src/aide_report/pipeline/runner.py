"""Run one attack-origin report end to end.

Querying, decoding, report creation and saving fail fast: their errors
propagate to the caller. Column and summary writes are recorded in
:attr:`ReportRunResult.failures` and the run carries on, so a report with some
columns missing is still saved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..config import Settings
from ..decode import decode_cardinality, decode_terms
from ..errors import ReportError
from ..report.summary import ASN_SHEET, COUNTRY_SHEET, asn_summary, country_summary
from ..report.writer import (
    CellValue,
    Report,
    create_report,
    populate_column,
    save_report,
    write_summary,
)
from ..search.client import SearchClient
from ..search.queries import (
    ASN_TOP_QUERY,
    COUNTRY_TOP_QUERY,
    UNIQUE_ASN_QUERY,
    UNIQUE_COUNTRY_QUERY,
)
from ..tabulate import COUNT_COLUMN, DATA_START_ROW, NAME_COLUMN, ReportTable

logger = logging.getLogger(__name__)


@dataclass
class RunFailure:
    operation: str
    error: str

    def __str__(self) -> str:
        return f"{self.operation}: {self.error}"


@dataclass
class ReportRunResult:
    path: Optional[Path] = None
    asn_table: Optional[ReportTable] = None
    country_table: Optional[ReportTable] = None
    unique_asns: int = 0
    unique_countries: int = 0
    failures: List[RunFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.path is not None and not self.failures


def _populate_columns(
    report: Report, tables: Sequence[ReportTable]
) -> List[RunFailure]:
    failures: List[RunFailure] = []
    for table in tables:
        columns: Tuple[Tuple[str, Sequence[CellValue]], ...] = (
            (NAME_COLUMN, table.names),
            (COUNT_COLUMN, table.counts),
        )
        for column, values in columns:
            try:
                populate_column(values, column, DATA_START_ROW, table.sheet_name, report)
            except ReportError as exc:
                failure = RunFailure(f"populate {table.sheet_name}!{column}", str(exc))
                logger.error("Failed to %s", failure)
                failures.append(failure)
    return failures


def _write_summaries(
    report: Report,
    summaries: Sequence[Tuple[str, Tuple[str, str]]],
) -> List[RunFailure]:
    failures: List[RunFailure] = []
    for sheet_name, lines in summaries:
        try:
            write_summary(report, sheet_name, lines)
        except ReportError as exc:
            failure = RunFailure(f"write summary for {sheet_name}", str(exc))
            logger.error("Failed to %s", failure)
            failures.append(failure)
    return failures


def run_report(
    settings: Settings,
    client: Optional[SearchClient] = None,
    *,
    identity: Optional[str] = None,
    output_dir: Optional[str] = None,
    created_at: Optional[datetime] = None,
    on_step: Optional[Callable[[str], None]] = None,
) -> ReportRunResult:
    """Query the backend, build the spreadsheet and save it.

    A client passed in is left open; one created here is closed before
    returning.
    """
    owns_client = client is None
    search = client if client is not None else SearchClient(settings)
    result = ReportRunResult()

    def _step(name: str) -> None:
        logger.debug("Report run step: %s", name)
        if on_step:
            on_step(name)

    try:
        _step("querying")
        asn_buckets = decode_terms(search.execute(ASN_TOP_QUERY))
        country_buckets = decode_terms(search.execute(COUNTRY_TOP_QUERY))
        result.unique_asns = decode_cardinality(search.execute(UNIQUE_ASN_QUERY))
        result.unique_countries = decode_cardinality(
            search.execute(UNIQUE_COUNTRY_QUERY)
        )
    finally:
        if owns_client:
            search.close()

    _step("tabulating")
    asn_table = ReportTable.from_buckets(ASN_SHEET, asn_buckets)
    country_table = ReportTable.from_buckets(COUNTRY_SHEET, country_buckets)
    result.asn_table = asn_table
    result.country_table = country_table
    logger.info(
        "Tabulated %d ASNs (%s) and %d countries (%s)",
        asn_table.row_count,
        asn_table.range,
        country_table.row_count,
        country_table.range,
    )

    _step("creating")
    report = create_report(
        identity if identity is not None else settings.report_identity,
        asn_table.range,
        country_table.range,
        output_dir if output_dir is not None else settings.report_output_dir,
        created_at=created_at,
    )

    _step("populating")
    result.failures.extend(_populate_columns(report, (asn_table, country_table)))

    _step("summarising")
    result.failures.extend(
        _write_summaries(
            report,
            (
                (ASN_SHEET, asn_summary(result.unique_asns, asn_table.row_count)),
                (
                    COUNTRY_SHEET,
                    country_summary(result.unique_countries, country_table.row_count),
                ),
            ),
        )
    )

    _step("saving")
    result.path = save_report(report)
    if result.failures:
        logger.warning(
            "Report saved with %d recoverable failures: %s",
            len(result.failures),
            result.path,
        )
    return result
