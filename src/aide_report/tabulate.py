from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .schemas import Bucket

HEADER_ROWS = 3
TABLE_ORIGIN = "A3"
DATA_START_ROW = HEADER_ROWS + 1
NAME_COLUMN = "A"
COUNT_COLUMN = "B"


def table_range(row_count: int) -> str:
    """Return the two-column range for a table with *row_count* data rows."""
    if row_count < 0:
        raise ValueError(f"row count must be >= 0, got {row_count}")
    return f"{TABLE_ORIGIN}:{COUNT_COLUMN}{row_count + HEADER_ROWS}"


@dataclass
class ReportTable:
    sheet_name: str
    names: List[str] = field(default_factory=list)
    counts: List[int] = field(default_factory=list)
    origin: str = TABLE_ORIGIN

    @classmethod
    def from_buckets(cls, sheet_name: str, buckets: Iterable[Bucket]) -> "ReportTable":
        table = cls(sheet_name=sheet_name)
        for bucket in buckets:
            table.names.append(bucket.key)
            table.counts.append(bucket.doc_count)
        return table

    @property
    def row_count(self) -> int:
        return len(self.names)

    @property
    def range(self) -> str:
        return table_range(self.row_count)
