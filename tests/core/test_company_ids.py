"""Company Identifiers: tests for parsing client-supplied ids.

Tests cover:
    - ASCII decimal ids within the signed 32-bit range parse to int
    - Range bounds are inclusive
    - Out-of-range, non-ASCII, padded, underscored and signed-plus ids parse to None
"""

import pytest

from sample_api.core.company_ids import COMPANY_ID_MAX, COMPANY_ID_MIN, parse_company_id


@pytest.mark.parametrize("raw, key", [("1", 1), ("42", 42), ("0", 0), ("-7", -7), ("007", 7)])
def test_parse_company_id_accepts_decimal(raw, key):
    assert parse_company_id(raw) == key


def test_parse_company_id_range_is_inclusive():
    assert parse_company_id(str(COMPANY_ID_MAX)) == COMPANY_ID_MAX
    assert parse_company_id(str(COMPANY_ID_MIN)) == COMPANY_ID_MIN


@pytest.mark.parametrize("raw", [
    str(COMPANY_ID_MAX + 1),
    str(COMPANY_ID_MIN - 1),
    "99999999999999999999",
    "١",
    " 1",
    "1 ",
    "1_0",
    "+1",
    "",
    "-",
    "abc",
    "1.0",
])
def test_parse_company_id_rejects_unusable_keys(raw):
    assert parse_company_id(raw) is None
