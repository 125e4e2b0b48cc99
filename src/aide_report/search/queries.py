"""Fixed aggregation queries used to build the attack-origin report.

Terms queries count attack documents per origin and are keyed ``"2"`` in the
response; cardinality queries count distinct origins across all traffic and
are keyed ``"1"``. Every query covers the same rolling window.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

WINDOW_HOURS = 12

ATTACK_INDICATOR_FIELDS = (
    "loggedin",
    "credentials",
    "commands",
    "unknownCommands",
    "urls",
    "hashes",
)

ASN_FIELD = "geoip.as_org.keyword"
COUNTRY_FIELD = "geoip.country_name.keyword"


class AggregationKind(str, Enum):
    TERMS = "terms"
    CARDINALITY = "cardinality"


def _attack_indicator_query() -> str:
    return " OR ".join(f"_exists_:{name}" for name in ATTACK_INDICATOR_FIELDS)


@dataclass(frozen=True)
class AggregationQuery:
    name: str
    field: str
    kind: AggregationKind
    aggregation_id: str
    size: Optional[int] = None
    attack_only: bool = False
    window: str = f"now-{WINDOW_HOURS}h"

    def _aggregation(self) -> Dict[str, Any]:
        if self.kind is AggregationKind.TERMS:
            terms: Dict[str, Any] = {
                "field": self.field,
                "order": {"_count": "desc"},
            }
            if self.size is not None:
                terms["size"] = self.size
            return {"terms": terms}
        return {"cardinality": {"field": self.field}}

    def _query(self, time_zone: str) -> Dict[str, Any]:
        must: List[Dict[str, Any]] = []
        if self.attack_only:
            must.append(
                {
                    "query_string": {
                        "query": _attack_indicator_query(),
                        "analyze_wildcard": True,
                        "time_zone": time_zone,
                    }
                }
            )
        window_filter = {
            "range": {
                "@timestamp": {
                    "gte": self.window,
                    "lte": "now",
                    "format": "strict_date_optional_time",
                }
            }
        }
        return {"bool": {"must": must, "filter": [window_filter]}}

    def to_body(self, time_zone: str = "Europe/London") -> Dict[str, Any]:
        """Render the search request body (keyword arguments for ``search``)."""
        return {
            "aggs": {self.aggregation_id: self._aggregation()},
            "size": 0,
            "query": self._query(time_zone),
        }


ASN_TOP_QUERY = AggregationQuery(
    name="attacks by ASN",
    field=ASN_FIELD,
    kind=AggregationKind.TERMS,
    aggregation_id="2",
    size=5000,
    attack_only=True,
)

COUNTRY_TOP_QUERY = AggregationQuery(
    name="attacks by country",
    field=COUNTRY_FIELD,
    kind=AggregationKind.TERMS,
    aggregation_id="2",
    size=2000,
    attack_only=True,
)

UNIQUE_ASN_QUERY = AggregationQuery(
    name="unique peer ASNs",
    field=ASN_FIELD,
    kind=AggregationKind.CARDINALITY,
    aggregation_id="1",
)

UNIQUE_COUNTRY_QUERY = AggregationQuery(
    name="unique peer countries",
    field=COUNTRY_FIELD,
    kind=AggregationKind.CARDINALITY,
    aggregation_id="1",
)

QUERY_CATALOG = (
    ASN_TOP_QUERY,
    COUNTRY_TOP_QUERY,
    UNIQUE_ASN_QUERY,
    UNIQUE_COUNTRY_QUERY,
)
