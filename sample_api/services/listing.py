"""Table Listing: whole-table reads for the read-only and company listings.

Invariants:
    - Rows are returned column-for-column as the store yields them (opaque records)
    - Order is by primary key
"""

from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncSession


async def list_table_rows(db: AsyncSession, table: Table) -> list[dict]:
    """SELECT * from table, ordered by primary key."""
    result = await db.execute(
        select(table).order_by(*table.primary_key.columns),
    )
    return [dict(row) for row in result.mappings().all()]
