from .summary import ASN_SHEET, COUNTRY_SHEET, asn_summary, country_summary
from .writer import (
    Report,
    create_report,
    populate_column,
    save_report,
    write_summary,
)

__all__ = [
    "ASN_SHEET",
    "COUNTRY_SHEET",
    "Report",
    "asn_summary",
    "country_summary",
    "create_report",
    "populate_column",
    "save_report",
    "write_summary",
]
