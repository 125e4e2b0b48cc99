from __future__ import annotations

import pytest

from aide_report.search.queries import (
    ASN_TOP_QUERY,
    COUNTRY_TOP_QUERY,
    UNIQUE_ASN_QUERY,
    UNIQUE_COUNTRY_QUERY,
)
from tests.search_fakes import (
    ASN_PAIRS,
    COUNTRY_PAIRS,
    FakeSearchClient,
    cardinality_body,
    terms_body,
)


@pytest.fixture
def fake_search() -> FakeSearchClient:
    return FakeSearchClient(
        {
            ASN_TOP_QUERY: terms_body(ASN_PAIRS),
            COUNTRY_TOP_QUERY: terms_body(COUNTRY_PAIRS),
            UNIQUE_ASN_QUERY: cardinality_body(50),
            UNIQUE_COUNTRY_QUERY: cardinality_body(20),
        }
    )
