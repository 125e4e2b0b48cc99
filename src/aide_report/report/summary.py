from __future__ import annotations

from typing import Tuple

from ..search.queries import WINDOW_HOURS

ASN_SHEET = "By ASN"
COUNTRY_SHEET = "By Country of Origin"


def asn_summary(unique_count: int, attack_present_count: int) -> Tuple[str, str]:
    return (
        f"In the past {WINDOW_HOURS} hours, AIDE observed {unique_count} unique peer ASNs.",
        f"Of those, {attack_present_count} were present in attacker data.",
    )


def country_summary(unique_count: int, attack_present_count: int) -> Tuple[str, str]:
    return (
        f"In the past {WINDOW_HOURS} hours, AIDE observed {unique_count} unique peer countries.",
        f"Of those, {attack_present_count} were the country of origin for attacks.",
    )
