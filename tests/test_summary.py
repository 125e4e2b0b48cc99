from aide_report.report.summary import asn_summary, country_summary


def test_asn_summary_sentences():
    assert asn_summary(42, 5) == (
        "In the past 12 hours, AIDE observed 42 unique peer ASNs.",
        "Of those, 5 were present in attacker data.",
    )


def test_country_summary_sentences():
    assert country_summary(20, 3) == (
        "In the past 12 hours, AIDE observed 20 unique peer countries.",
        "Of those, 3 were the country of origin for attacks.",
    )
