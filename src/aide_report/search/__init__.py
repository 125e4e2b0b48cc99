from .client import SearchClient
from .queries import (
    ASN_TOP_QUERY,
    COUNTRY_TOP_QUERY,
    QUERY_CATALOG,
    UNIQUE_ASN_QUERY,
    UNIQUE_COUNTRY_QUERY,
    AggregationKind,
    AggregationQuery,
)

__all__ = [
    "ASN_TOP_QUERY",
    "COUNTRY_TOP_QUERY",
    "QUERY_CATALOG",
    "UNIQUE_ASN_QUERY",
    "UNIQUE_COUNTRY_QUERY",
    "AggregationKind",
    "AggregationQuery",
    "SearchClient",
]
