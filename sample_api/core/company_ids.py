"""Company Identifiers: parsing of client-supplied ids against the key column range.

Invariants:
    - company.company_id is a signed 32-bit integer column
    - parse_company_id returns None for anything that cannot name a row:
      non-ASCII digits, whitespace, underscores, signs other than a leading '-',
      and values outside the column range
"""

import re

COMPANY_ID_MIN = -2**31
COMPANY_ID_MAX = 2**31 - 1

_DECIMAL = re.compile(r"-?[0-9]+")


def parse_company_id(value: str) -> int | None:
    if not _DECIMAL.fullmatch(value):
        return None
    key = int(value)
    if not COMPANY_ID_MIN <= key <= COMPANY_ID_MAX:
        return None
    return key
