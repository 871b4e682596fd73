"""Company Partial Update: composes the column set for a PATCH.

Invariants:
    - Only supplied (non-None) fields appear in the result
    - Empty result means the caller must not touch the store
    - Column names are the Company table's, never caller-controlled
"""

NAME_COLUMN = "company_name"
CITY_COLUMN = "company_city"


def build_company_updates(
    name: str | None = None, city: str | None = None,
) -> dict[str, str]:
    """Accumulate (column, value) pairs for the fields the caller supplied."""
    updates: dict[str, str] = {}
    if name is not None:
        updates[NAME_COLUMN] = name
    if city is not None:
        updates[CITY_COLUMN] = city
    return updates
