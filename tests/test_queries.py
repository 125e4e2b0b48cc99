from __future__ import annotations

from aide_report.search.queries import (
    ASN_TOP_QUERY,
    ATTACK_INDICATOR_FIELDS,
    COUNTRY_TOP_QUERY,
    QUERY_CATALOG,
    UNIQUE_ASN_QUERY,
    UNIQUE_COUNTRY_QUERY,
    AggregationKind,
)


def test_catalog_holds_the_four_report_queries():
    assert QUERY_CATALOG == (
        ASN_TOP_QUERY,
        COUNTRY_TOP_QUERY,
        UNIQUE_ASN_QUERY,
        UNIQUE_COUNTRY_QUERY,
    )


def test_terms_queries_are_count_ordered_and_capped():
    asn = ASN_TOP_QUERY.to_body()
    country = COUNTRY_TOP_QUERY.to_body()

    assert asn["size"] == 0
    assert asn["aggs"]["2"]["terms"] == {
        "field": "geoip.as_org.keyword",
        "order": {"_count": "desc"},
        "size": 5000,
    }
    assert country["aggs"]["2"]["terms"]["field"] == "geoip.country_name.keyword"
    assert country["aggs"]["2"]["terms"]["size"] == 2000


def test_terms_queries_require_attack_indicators():
    body = ASN_TOP_QUERY.to_body(time_zone="UTC")
    query_string = body["query"]["bool"]["must"][0]["query_string"]

    assert query_string["time_zone"] == "UTC"
    assert query_string["analyze_wildcard"] is True
    for name in ATTACK_INDICATOR_FIELDS:
        assert f"_exists_:{name}" in query_string["query"]
    assert query_string["query"].count(" OR ") == len(ATTACK_INDICATOR_FIELDS) - 1


def test_cardinality_queries_count_all_traffic():
    body = UNIQUE_COUNTRY_QUERY.to_body()

    assert UNIQUE_COUNTRY_QUERY.kind is AggregationKind.CARDINALITY
    assert body["aggs"] == {
        "1": {"cardinality": {"field": "geoip.country_name.keyword"}}
    }
    assert body["query"]["bool"]["must"] == []


def test_every_query_covers_the_last_twelve_hours():
    for query in QUERY_CATALOG:
        window = query.to_body()["query"]["bool"]["filter"][0]["range"]["@timestamp"]
        assert window["gte"] == "now-12h"
        assert window["lte"] == "now"
